"""Prompts for the menu vision model."""

import json
from typing import Any, Dict, List

EXAMPLE_DISH = {
    "name": "Caesar Salad",
    "description": "Romaine lettuce, parmesan, croutons, caesar dressing",
    "fodmapLevel": "moderate",
    "concerns": ["Garlic in dressing", "Wheat croutons"],
    "alternatives": ["Ask for dressing on side", "Replace croutons with nuts"],
}

MENU_ANALYSIS_PROMPT = """
You are a dietitian specialised in the low-FODMAP diet.

Analyze this restaurant menu image. For EACH food item on the menu identify:
- "name": the dish name as written on the menu
- "description": a brief description of the dish
- "fodmapLevel": one of "low", "moderate" or "high"
- "concerns": list of potential FODMAP triggers (e.g. "Garlic in dressing", "Wheat pasta")
- "alternatives": list of modifications or alternatives (e.g. "Ask for dressing on side")

Return a JSON array of objects with exactly these keys:
"name", "description", "fodmapLevel", "concerns", "alternatives".
If you cannot determine some information, use an empty string or an empty array.
Focus on common FODMAP triggers.

Example item:
{example}
"""


def build_menu_prompt() -> str:
    return MENU_ANALYSIS_PROMPT.replace("{example}", json.dumps(EXAMPLE_DISH)).strip()


def build_menu_messages(image_url: str) -> List[Dict[str, Any]]:
    """
    Build the single user message sent to the vision model.

    The URL is passed through as given (public URL or data: URL);
    it is not validated here.
    """
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": build_menu_prompt()},
                {"type": "image_url", "image_url": {"url": image_url}},
            ],
        }
    ]
