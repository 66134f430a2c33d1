# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Email/username + password registration and cookie-session login service."""

__version__ = "0.1.0"
