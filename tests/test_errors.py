import pytest

from pmxadmission.errors import (
    AdmissionError,
    BadRequestError,
    FieldError,
    FieldPath,
    InvalidError,
    invalid,
)


def test_field_path_joins_segments_with_dots():
    path = FieldPath("spec", "network").child("additionalDevices", 0, "mtu")
    assert str(path) == "spec.network.additionalDevices.0.mtu"


def test_child_leaves_original_unchanged():
    base = FieldPath("spec")
    extended = base.child("network")
    assert base.segments == ("spec",)
    assert extended.segments == ("spec", "network")


def test_field_path_equality_and_hash():
    assert FieldPath("spec", "a") == FieldPath("spec").child("a")
    assert len({FieldPath("spec", "a"), FieldPath("spec").child("a")}) == 1


def test_invalid_builds_field_error():
    path = FieldPath("spec", "network", "default", "mtu")
    error = invalid(path, 50, "too small")
    assert isinstance(error, FieldError)
    assert error.path == path
    assert error.value == 50
    assert str(error).startswith("spec.network.default.mtu: Invalid value")
    assert str(error).endswith(": too small")


def test_string_values_are_quoted():
    error = invalid(FieldPath("spec", "host"), "abc", "bad")
    assert '"abc"' in str(error)


def test_invalid_error_message_with_one_error():
    field_error = invalid(FieldPath("spec", "x"), 1, "broken")
    err = InvalidError("Kind.example.org", "thing", [field_error])
    assert str(err) == f'Kind.example.org "thing" is invalid: {field_error}'
    assert err.errors == [field_error]
    assert err.name == "thing"


def test_invalid_error_message_with_several_errors():
    first = invalid(FieldPath("a"), 1, "one")
    second = invalid(FieldPath("b"), 2, "two")
    err = InvalidError("Kind", "thing", [first, second])
    assert str(err).endswith(f"[{first}, {second}]")


def test_admission_error_warnings_are_a_copy():
    source = ["careful"]
    err = AdmissionError("refused", source)
    err.warnings.append("more")
    assert source == ["careful"]
    assert err.warnings == ["careful", "more"]


def test_bad_request_is_an_admission_error():
    assert issubclass(BadRequestError, AdmissionError)
    err = BadRequestError("wrong kind")
    assert "wrong kind" in str(err)
    with pytest.raises(AdmissionError, match="wrong kind"):
        raise err