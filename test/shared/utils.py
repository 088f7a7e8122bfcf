from typing import Any, Dict

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import AUTH_LOGIN, AUTH_REGISTER


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def register_user(client: TestClient, email: str, password: str) -> Dict[str, Any]:
    response = client.post(AUTH_REGISTER, json={'email': email, 'password': password})
    assert_response_status(response, 201, f'Failed to register {email}')
    return response.json()


def login_user(client: TestClient, email: str, password: str) -> Dict[str, Any]:
    """Helper function to login a user, returns the token payload."""
    response = client.post(AUTH_LOGIN, json={'email': email, 'password': password})
    assert_response_status(response, 200, f'Login failed: {response.text}')
    return response.json()


def auth_headers(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def register_and_login(client: TestClient, email: str, password: str) -> Dict[str, str]:
    """Register a fresh user and return bearer headers for it."""
    register_user(client, email, password)
    return auth_headers(login_user(client, email, password)['token'])
