"""Endpoint methods for the Namabar API.

Generated from https://api.namabar.krd/openapi/v1.json (API version v1).
Do not edit by hand: regenerate with ``python -m generator``.
"""

from __future__ import annotations

from typing import Any

import httpx


class Endpoints:
    """One method per operation in the OpenAPI spec.

    Mixed into :class:`namabar.client.Client`, which supplies
    ``default_options()`` and ``_request()``. Every method returns the
    ``httpx.Response`` unchanged.

    Example::

        client = namabar.client()
        response = client.get_message(id="68397dd4467eecf49d28cebc")
        print(response.status_code, response.json())
    """

    def create_verification_code(
        self,
        *,
        to: str,
        service_id: str,
        locale: str | None = None,
        external_id: str | None = None,
        code: str | None = None,
        template_data: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Create Verification Code

        Generates and sends a new verification code to the specified recipient
        using the configured verify service.

        Args:
            to (str): (required)
            locale (str): (optional)
            external_id (str): (optional)
            code (str): (optional)
            service_id (str): (required)
            template_data (dict[str, Any]): (optional)

        Returns:
            httpx.Response: the HTTP response object
        """
        url = "/verification-codes"
        opts: dict[str, Any] = self.default_options()

        body_data = {
            "to": to,
            "locale": locale,
            "externalId": external_id,
            "code": code,
            "serviceId": service_id,
            "templateData": template_data,
        }
        body_data = {k: v for k, v in body_data.items() if v is not None}
        if body_data:
            opts["json"] = body_data

        return self._request("POST", url, **opts)

    def verify_verification_code(
        self,
        *,
        id: str,
        code: str,
    ) -> httpx.Response:
        """Verify OTP Code

        Verifies a previously sent verification code. Returns the verification
        status and any associated data.

        Args:
            id (str): The id of the verification code to verify. (required)
            code (str): (required)

        Returns:
            httpx.Response: the HTTP response object
        """
        url = "/verification-codes/{id}/verify"
        url = url.replace("{id}", str(id))
        opts: dict[str, Any] = self.default_options()

        body_data = {
            "code": code,
        }
        body_data = {k: v for k, v in body_data.items() if v is not None}
        if body_data:
            opts["json"] = body_data

        return self._request("POST", url, **opts)

    def get_verification_code_by_id(
        self,
        *,
        id: str,
    ) -> httpx.Response:
        """Get Verification Code

        Retrieves details about a specific verification code.

        Args:
            id (str): The ID of the verification code to retrieve (required)

        Returns:
            httpx.Response: the HTTP response object
        """
        url = "/verification-codes/{id}"
        url = url.replace("{id}", str(id))
        opts: dict[str, Any] = self.default_options()

        return self._request("GET", url, **opts)

    def send_message(
        self,
        *,
        type: str,
        to: str,
        service_id: str,
        external_id: str | None = None,
        text: str | None = None,
        template: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send New Message

        Creates and sends a new message through the specified messaging
        service. Requires the CreateMessage permission.

        Args:
            type (str): (required)
            to (str): (required)
            external_id (str): (optional)
            service_id (str): (required)
            text (str): (optional)
            template (dict[str, Any]): (optional)

        Returns:
            httpx.Response: the HTTP response object
        """
        url = "/messages"
        opts: dict[str, Any] = self.default_options()

        body_data = {
            "type": type,
            "to": to,
            "externalId": external_id,
            "serviceId": service_id,
            "text": text,
            "template": template,
        }
        body_data = {k: v for k, v in body_data.items() if v is not None}
        if body_data:
            opts["json"] = body_data

        return self._request("POST", url, **opts)

    def get_message(
        self,
        *,
        id: str,
    ) -> httpx.Response:
        """Get Message Details

        Retrieves detailed information about a specific message including its
        status, cost, and delivery information.

        Args:
            id (str): The ID of the message to get. (required)

        Returns:
            httpx.Response: the HTTP response object
        """
        url = "/messages/{id}"
        url = url.replace("{id}", str(id))
        opts: dict[str, Any] = self.default_options()

        return self._request("GET", url, **opts)

    def get_message_status(
        self,
        *,
        id: str,
    ) -> httpx.Response:
        """Get Message Status

        Retrieves the status of a specific message, can be used for polling
        message delivery status.

        Args:
            id (str): The ID of the message to get. (required)

        Returns:
            httpx.Response: the HTTP response object
        """
        url = "/messages/{id}/status"
        url = url.replace("{id}", str(id))
        opts: dict[str, Any] = self.default_options()

        return self._request("GET", url, **opts)
