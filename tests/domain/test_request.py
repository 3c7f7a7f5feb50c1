# tests/domain/test_request.py
import dataclasses

import pytest

from domain.request import StepRequest
from domain.response import StepResponse


class TestStepRequest:
    def test_from_dict(self):
        req = StepRequest.from_dict({"url": "https://alt.example/x", "form_data": {"a": "1"}})
        assert req.url == "https://alt.example/x"
        assert req.form_data == {"a": "1"}
        assert req.method is None

    def test_from_empty_dict(self):
        assert StepRequest.from_dict({}) == StepRequest()
        assert StepRequest.from_dict(None) == StepRequest()

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValueError, match="formData"):
            StepRequest.from_dict({"formData": {"a": "1"}})

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            StepRequest().method = "POST"


def test_step_response_output_attached_by_copy():
    response = StepResponse(status=200, url="u", text="body")
    processed = dataclasses.replace(response, output="done")

    assert response.output is None
    assert processed.output == "done"
    assert processed.text == "body"
