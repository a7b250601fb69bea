"""Failure status translation."""

from __future__ import annotations

import pytest

from keygate.status import Status, StatusCode, StatusError, translate_failure_status


class TestTranslateFailureStatus:
    @pytest.mark.parametrize(
        "code, expected",
        [
            (StatusCode.BAD_REQUEST, 400),
            (StatusCode.CONFLICT, 409),
            (StatusCode.NOT_ACCEPTABLE, 406),
            (StatusCode.NOT_FOUND, 404),
        ],
    )
    def test_mapped_codes(self, code, expected):
        assert translate_failure_status(Status(code, "boom")) == expected

    @pytest.mark.parametrize(
        "code",
        [
            StatusCode.UNAUTHORIZED,
            StatusCode.FORBIDDEN,
            StatusCode.GONE,
            StatusCode.TIMEOUT,
            StatusCode.INTERNAL_ERROR,
            StatusCode.NO_SERVICE,
            StatusCode.UNDEFINED,
        ],
    )
    def test_unmapped_codes_are_internal_errors(self, code):
        assert translate_failure_status(Status(code)) == 500

    def test_accepts_bare_status_code(self):
        assert translate_failure_status(StatusCode.NOT_FOUND) == 404

    def test_returns_plain_int(self):
        assert type(translate_failure_status(StatusCode.CONFLICT)) is int

    @pytest.mark.parametrize("code", [StatusCode.SUCCESS, StatusCode.CREATED])
    def test_success_status_is_a_caller_bug(self, code):
        with pytest.raises(AssertionError):
            translate_failure_status(Status(code))


class TestStatus:
    def test_success_flags(self):
        assert Status(StatusCode.SUCCESS).is_success
        assert Status(StatusCode.CREATED).is_success
        assert not Status(StatusCode.NOT_FOUND).is_success

    def test_status_is_frozen(self):
        status = Status(StatusCode.SUCCESS)
        with pytest.raises(AttributeError):
            status.code = StatusCode.CONFLICT

    def test_status_error_message(self):
        exc = StatusError(Status(StatusCode.CONFLICT, "networks object abc already exists"))
        assert str(exc) == "networks object abc already exists"
        assert exc.status.code is StatusCode.CONFLICT

    def test_status_error_without_description(self):
        assert str(StatusError(Status(StatusCode.GONE))) == "gone"
