"""
Tests for application-level behaviour: health checks and error shaping.
"""

import logging

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from jobboard.core.errors import AppError, BadRequestError, NotFoundError, format_validation_errors
from jobboard.core.validation import coerce_number, validate_payload
from jobboard.schemas.job import JobSearch
from main import create_app


class TestHealthCheck:

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_check_with_database(self, client):
        response = client.get("/health/detailed")

        assert response.status_code == 200
        assert response.json()["checks"]["database"]["status"] == "healthy"


class TestErrorShape:

    def test_unknown_route(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Not Found", "status": 404}}

    def test_method_not_allowed(self, client):
        response = client.put("/jobs/1", json={})

        assert response.status_code == 405
        assert response.json()["error"]["status"] == 405

    def test_app_error_from_handler(self):
        app = create_app()
        router = APIRouter()

        @router.get("/boom")
        def boom():
            raise AppError()

        app.include_router(router)

        response = TestClient(app).get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "Internal Server Error", "status": 500}}

    def test_errors_default_messages(self):
        assert NotFoundError().message == "Not Found"
        assert NotFoundError("No job: 3").status_code == 404

    def test_unhandled_error(self, caplog):
        app = create_app()
        router = APIRouter()

        @router.get("/crash")
        def crash():
            raise RuntimeError("kaboom")

        app.include_router(router)

        with caplog.at_level(logging.ERROR):
            response = TestClient(app, raise_server_exceptions=False).get("/crash")

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "Internal Server Error", "status": 500}}
        assert "kaboom" not in response.text
        request_records = [r for r in caplog.records if r.name == "jobboard.request"]
        assert len(request_records) == 1
        assert request_records[0].exc_info is None
        assert any(r.exc_info for r in caplog.records if r.name == "jobboard.core.errors")


class TestValidationHelpers:

    def test_format_validation_errors(self):
        errors = [
            {"loc": ("body", "title"), "msg": "Field required"},
            {"loc": ("query", "minSalary"), "msg": "Input should be a valid integer"},
            {"loc": (), "msg": "Input should be a valid dictionary"},
        ]

        assert format_validation_errors(errors) == [
            "title: Field required",
            "minSalary: Input should be a valid integer",
            "Input should be a valid dictionary",
        ]

    @pytest.mark.parametrize("raw, expected", [("10", 10), ("2.5", 2.5), ("abc", "abc")])
    def test_coerce_number(self, raw, expected):
        assert coerce_number(raw) == expected

    def test_validate_payload_collects_all_messages(self):
        with pytest.raises(BadRequestError) as exc_info:
            validate_payload(JobSearch, {"title": "", "minSalary": "abc", "extra": 1})

        assert len(exc_info.value.message) == 3

    def test_validate_payload_returns_model(self):
        filters = validate_payload(JobSearch, {"minSalary": 5, "hasEquity": True})

        assert filters.min_salary == 5
        assert filters.has_equity is True
        assert filters.title is None
