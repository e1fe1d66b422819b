"""System prompts and instruction texts for LLM interactions."""

NEWSLETTER_SYSTEM_PROMPT = """You are a newsletter generating AI.
Format your answer with these markers and nothing else:
- Keep the title within a single * symbol, like *Title*
- Keep each subtitle within ** symbols, like **Subtitle**
- Keep each paragraph within *** symbols, like ***Paragraph***, directly after its subtitle
- Keep the tags within **** symbols, like ****tag one, tag two****, and separate each tag with a comma
- Keep every title, subtitle, paragraph and tag line on a single line

The newsletter belongs to the category: {category}

Generate the newsletter taking reference from here:
{reference}

Keep the title relative to the user input and the reference data provided."""


def build_system_prompt(reference: str, category: str) -> str:
    """Embed scraped reference text and the category into the system instruction."""
    return NEWSLETTER_SYSTEM_PROMPT.format(reference=reference, category=category)
