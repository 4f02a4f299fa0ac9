"""
Prompt templates for content and protest-sign image generation.
"""

SYSTEM_PROMPT = (
    'You are an AI that generates creative, weird, and authentically Austin-themed content. '
    'Always respond with valid JSON only. All values must be strings, not objects.'
)


def build_content_prompt() -> str:
    return """Generate 4 Austin-themed items in JSON format. Make them creative, weird, and authentically Austin:

1. A band name that's weird and Austin-themed (string only)
2. A startup pitch for a tech company that's quintessentially Austin (string only)
3. A creative taco recipe with Austin ingredients (string only, not an object)
4. A protest sign slogan that's Austin-weird (string only)

Return ONLY valid JSON with these exact keys: bandName, startupPitch, tacoRecipe, protestSign

IMPORTANT: All values must be strings, not objects. For the taco recipe, return a simple string description, not a structured object."""


def build_content_messages() -> list[dict]:
    return [
        {'role': 'system', 'content': SYSTEM_PROMPT},
        {'role': 'user', 'content': build_content_prompt()},
    ]


def build_protest_sign_prompt(slogan: str) -> str:
    return (
        f'A compelling protest sign with the text "{slogan}". '
        'The sign should be hand-drawn style, bold and clear text, '
        'Austin-themed colors (orange, yellow, red), with a grassroots activist feel. '
        'The sign should look like it was made for a real Austin protest.'
    )
