"""LLM package exports."""
from newsletter_ai.llm.generator import generate_content
from newsletter_ai.llm.parser import parse_content
from newsletter_ai.llm.prompts import NEWSLETTER_SYSTEM_PROMPT, build_system_prompt

__all__ = [
    'generate_content',
    'parse_content',
    'NEWSLETTER_SYSTEM_PROMPT',
    'build_system_prompt'
]
