import json

from go_outing.ai.prompts import SUGGESTIONS_PROMPT, build_prompt
from go_outing.api.models.schemas import OutingRequest


def _request(**overrides):
    data = {"location": "Hyderabad", "date": "2024-11-01", "budget": 800, "mode": "car", "type": "cultural"}
    data.update(overrides)
    return OutingRequest(**data)


def test_user_prompt_interpolates_fields_verbatim():
    prompt = build_prompt(_request())
    assert prompt.user == (
        "User request:\n"
        "location: Hyderabad\n"
        "date: 2024-11-01\n"
        "budget: 800\n"
        "mode: car\n"
        "type: cultural\n"
        "\n"
        "Return suggestions as described above."
    )


def test_system_prompt_fixes_output_contract():
    prompt = build_prompt(_request())
    assert prompt.system == SUGGESTIONS_PROMPT
    for field in ("id", "title", "description", "estimatedCost", "image", "locationDetails", "itinerary", "costBreakdown", "tips", "bestTime"):
        assert f"- {field}:" in prompt.system
    assert "Return **only** valid JSON" in prompt.system
    assert "3-6 suggestions" in prompt.system


def test_system_prompt_example_is_valid_json():
    start = SUGGESTIONS_PROMPT.index("{")
    end = SUGGESTIONS_PROMPT.rindex("}")
    example = json.loads(SUGGESTIONS_PROMPT[start : end + 1])
    assert example["suggestions"][0]["title"] == "Charminar & Laad Bazaar Walk"


def test_messages_order():
    messages = build_prompt(_request()).to_messages()
    assert [m["role"] for m in messages] == ["system", "user"]
