from __future__ import annotations

import os
from typing import Any

import requests

API_BASE = os.getenv("CARECENTER_API_BASE_URL", "http://localhost:3000/api").rstrip("/")
REQUEST_TIMEOUT_SECONDS = float(os.getenv("CARECENTER_HTTP_TIMEOUT_SECONDS", "20"))


class CareCenterApiError(RuntimeError):
    def __init__(self, method: str, path: str, status_code: int, message: str):
        super().__init__(f"{method} {path} failed ({status_code}): {message}")
        self.status_code = status_code
        self.message = message


class CareCenterClient:
    """
    Thin HTTP client for the care center API.

    Methods return the decoded JSON envelope. ``session`` can be any object
    with a requests-compatible ``request`` method.
    """

    def __init__(
        self,
        base_url: str = API_BASE,
        *,
        session: Any | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
        response = self.session.request(
            method,
            f"{self.base_url}{path}",
            json=body,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        try:
            parsed = response.json()
        except ValueError:
            parsed = {"message": response.text}

        if response.status_code >= 400:
            message = parsed
            if isinstance(parsed, dict):
                message = parsed.get("message") or parsed.get("detail") or ""
            raise CareCenterApiError(method, path, response.status_code, str(message))
        return parsed

    def get_family(self) -> dict[str, Any]:
        return self._request("GET", "/family")

    def toggle_star(self, member_id: int) -> dict[str, Any]:
        return self._request("PATCH", f"/family/{member_id}/star")

    def add_member(
        self,
        *,
        first_name: str,
        last_name: str,
        family_status: str,
        email: str,
        phone: str | None = None,
        contract_id: int | None = None,
        status: str | None = None,
    ) -> dict[str, Any]:
        body = {
            "status": status,
            "firstName": first_name,
            "lastName": last_name,
            "familyStatus": family_status,
            "email": email,
            "phone": phone,
            "contractId": contract_id,
        }
        return self._request("POST", "/family", body)

    def assign_next_of_kin(self, member_id: int) -> dict[str, Any]:
        return self._request("POST", "/family/next-of-kin", {"memberId": member_id})

    def invite_next_of_kin(self, email: str) -> dict[str, Any]:
        return self._request("POST", "/family/next-of-kin", {"email": email})

    def update_accesses(self, member_id: int, contracts: list[str]) -> dict[str, Any]:
        return self._request("PATCH", f"/family/{member_id}/accesses", {"contracts": contracts})

    def delete_member(self, member_id: int) -> dict[str, Any]:
        return self._request("DELETE", f"/family/{member_id}")

    def get_contracts(self) -> dict[str, Any]:
        return self._request("GET", "/contracts")

    def get_profile(self) -> dict[str, Any]:
        return self._request("GET", "/profile")

    def update_profile(self, changes: dict[str, Any]) -> dict[str, Any]:
        return self._request("PUT", "/profile", changes)

    def upload_photo(self, photo_url: str | None) -> dict[str, Any]:
        return self._request("POST", "/profile/photo", {"photoUrl": photo_url})
