"""Prompt templates for the outing suggestion request."""

from __future__ import annotations

from typing import NamedTuple

from go_outing.api.models.schemas import OutingRequest

SUGGESTIONS_PROMPT = """You are "Go Outing", an expert, concise outing planner for India.
When asked, produce a JSON array named "suggestions". Each suggestion must be an object with these fields:
- id: string (unique)
- title: short string
- description: short paragraph describing the outing
- estimatedCost: number (in rupees)
- image: URL string (if you cannot provide a real image, return empty string)
- locationDetails: short text about the place (neighbourhood / what's special)
- itinerary: array of short strings (step-by-step plan for the day)
- costBreakdown: array of short strings like "Travel: ₹100, Food: ₹200"
- tips: array of short tips
- bestTime: string (best time/season)
Return **only** valid JSON (no extra commentary). Example structure:

{
  "suggestions": [
    {
      "id":"s1",
      "title":"Charminar & Laad Bazaar Walk",
      "description":"A cultural half-day exploring Charminar and nearby bazaars...",
      "estimatedCost": 800,
      "image": "https://example.com/charminar.jpg",
      "locationDetails": "Old City, Hyderabad. Famous for pearls and biryani.",
      "itinerary": ["Start at Charminar", "Visit Mecca Masjid", "Lunch at local biryani spot"],
      "costBreakdown": ["Transport: ₹100", "Food: ₹400", "Shopping: ₹300"],
      "tips": ["Wear comfortable shoes", "Carry water"],
      "bestTime": "October - March"
    }
  ]
}

Be concise and return 3-6 suggestions tailored to the user's budget, mode, type and date. Assume the user inputs are in India."""


class PromptPair(NamedTuple):
    system: str
    user: str

    def to_messages(self) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


def build_prompt(request: OutingRequest) -> PromptPair:
    user_prompt = (
        "User request:\n"
        f"location: {request.location}\n"
        f"date: {request.date}\n"
        f"budget: {request.budget}\n"
        f"mode: {request.mode}\n"
        f"type: {request.type}\n"
        "\n"
        "Return suggestions as described above."
    )
    return PromptPair(system=SUGGESTIONS_PROMPT, user=user_prompt)
