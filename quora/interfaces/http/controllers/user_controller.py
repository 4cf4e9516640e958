# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from quora.application.use_cases.users.get_user_profile import GetUserProfileUseCase
from quora.interfaces.http.credentials import bearer_token
from quora.interfaces.http.dto.auth import UserDetailsDTO


class UserController:
    def __init__(self, *, get_profile: GetUserProfileUseCase) -> None:
        self._get_profile = get_profile

    def profile(self, user_id: str) -> tuple[Response, int]:
        user = self._get_profile.execute(user_id, bearer_token(request))
        return jsonify(UserDetailsDTO.from_user(user).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("userprofile", __name__, url_prefix="/userprofile")
        bp.add_url_rule("/<user_id>", view_func=self.profile, methods=["GET"])
        return bp


__all__ = ["UserController"]
