from __future__ import annotations

from ..models.schemas import BrandBrief

BRAND_DESIGNER_SYSTEM = "You are an expert brand designer. Always respond with valid JSON, no extra text."

UNKNOWN_BRAND = "Unknown Brand"
NOT_SPECIFIED = "Not specified"

BRAND_KIT_PROMPT = """
You are a brand designer. Generate a simple brand kit for the following brand.

Brand name: {brand_name}
Industry / niche: {industry}
Adjectives: {adjectives}
Target audience: {audience}

Return a JSON object with this exact shape:

{{
  "colors": ["#HEX1", "#HEX2", "#HEX3", "#HEX4", "#HEX5"],
  "headingFont": "Name of heading font (Google Fonts compatible)",
  "bodyFont": "Name of body font (Google Fonts compatible)",
  "personality": "2-3 sentences describing the brand personality and tone of voice"
}}

Important:
- Use real hex colors.
- Colors should match the adjectives and industry.
- Fonts should be widely available on Google Fonts.
- Personality should be concrete and helpful.
"""


def build_generation_prompt(brief: BrandBrief) -> str:
    """Render the user turn for a brief; empty fields get a placeholder."""
    return BRAND_KIT_PROMPT.format(
        brand_name=brief.brand_name or UNKNOWN_BRAND,
        industry=brief.industry or NOT_SPECIFIED,
        adjectives=brief.adjectives or NOT_SPECIFIED,
        audience=brief.audience or NOT_SPECIFIED,
    )


def build_messages(prompt: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": BRAND_DESIGNER_SYSTEM},
        {"role": "user", "content": prompt},
    ]
