"""
Pytest Configuration and Shared Fixtures
"""

import pytest
import os
import sys

import httpx

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.resolver import ErrorFieldResolver
from errors.node_error import ErrorNormalizer


@pytest.fixture
def resolver():
    """Resolver with the default depth limit"""
    return ErrorFieldResolver()


@pytest.fixture
def normalizer():
    """Normalizer with the default field lists and status table"""
    return ErrorNormalizer()


@pytest.fixture
def request_stub():
    """Request object for building httpx and openai errors"""
    return httpx.Request("POST", "https://api.example.com/v1/items")


# ==========================================
# Provider Payload Fixtures
# ==========================================

@pytest.fixture
def request_promise_payload():
    """Shape of a status error thrown by a request library: code on top, body nested"""
    return {
        "name": "StatusCodeError",
        "statusCode": 404,
        "error": {
            "error": {
                "message": "Item 42 does not exist",
                "type": "invalid_request_error",
            }
        },
    }


@pytest.fixture
def validation_payload():
    """Field-level validation errors returned as a list of objects"""
    return {
        "status": 422,
        "errors": [
            {"field": "email", "message": "is not a valid address"},
            {"field": "name", "message": "can't be blank"},
        ],
    }


@pytest.fixture
def graphql_payload():
    """GraphQL-style response carrying errors next to data"""
    return {
        "data": None,
        "response": {
            "body": {
                "errors": [
                    {"message": "Field 'id' is required", "extensions": {"code": "BAD_USER_INPUT"}},
                    {"message": "Unknown argument 'limit'"},
                ]
            }
        },
    }
