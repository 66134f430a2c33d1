# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint

from authbox.infrastructure.container import Container


def build_blueprints(container: Container) -> list[Blueprint]:
    blueprints = [
        container.misc_controller.as_blueprint(),
        container.auth_controller.as_blueprint(),
    ]
    if container.config.user_list_enabled():
        blueprints.append(container.users_controller.as_blueprint())
    return blueprints


__all__ = ["build_blueprints"]
