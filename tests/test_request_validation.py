import pytest

from mock_interview.core.exceptions import ValidationError
from mock_interview.schemas.interview import GenerationRequest
from mock_interview.services.request_validation import validate_generation_request

VALID = {
    "type": "Technical",
    "role": "Frontend Developer",
    "level": "Junior",
    "techstack": "React, TypeScript",
    "amount": 5,
    "userid": "user-1",
}


def build(**overrides) -> GenerationRequest:
    return GenerationRequest.model_validate({**VALID, **overrides})


def assert_rejected(request: GenerationRequest, message: str):
    with pytest.raises(ValidationError) as exc_info:
        validate_generation_request(request)
    assert exc_info.value.message == message
    assert exc_info.value.status_code == 400


def test_valid_request_passes():
    request = build()

    assert validate_generation_request(request) is request


@pytest.mark.parametrize("field", ["type", "role", "level", "techstack", "amount", "userid"])
def test_each_missing_field_is_rejected(field):
    payload = dict(VALID)
    payload.pop(field)

    assert_rejected(GenerationRequest.model_validate(payload), "Missing required fields")


@pytest.mark.parametrize("overrides", [{"role": ""}, {"techstack": ""}, {"techstack": []}, {"amount": 0}])
def test_falsy_values_count_as_missing(overrides):
    assert_rejected(build(**overrides), "Missing required fields")


def test_missing_fields_are_reported_before_invalid_enums():
    assert_rejected(build(type="Coding", level="Expert", role=None), "Missing required fields")


def test_invalid_type_is_reported_before_invalid_level():
    assert_rejected(build(type="Coding", level="Expert"), "Invalid interview type")


def test_invalid_level_is_rejected():
    assert_rejected(build(level="Principal"), "Invalid experience level")


def test_negative_amount_is_rejected():
    assert_rejected(build(amount=-3), "Amount must be a positive integer")


def test_large_amount_is_trusted():
    assert validate_generation_request(build(amount=500)).amount == 500


def test_camel_case_aliases_are_accepted():
    payload = {key: value for key, value in VALID.items() if key not in ("techstack", "userid")}
    request = GenerationRequest.model_validate({**payload, "techStack": ["Go"], "userId": "user-9"})

    assert request.techstack_items == ["Go"]
    assert request.user_id == "user-9"


def test_techstack_string_is_split_and_trimmed():
    request = build(techstack=" React, , Node.js ,TypeScript ")

    assert request.techstack_items == ["React", "Node.js", "TypeScript"]


@pytest.mark.parametrize("value", [5, 2.5, ["Technical"]])
def test_non_string_type_is_an_invalid_type(value):
    assert_rejected(build(type=value), "Invalid interview type")


def test_non_string_level_is_an_invalid_level():
    assert_rejected(build(level=3), "Invalid experience level")
