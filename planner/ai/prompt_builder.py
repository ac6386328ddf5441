from typing import Optional
from .safety_rules import SAFETY_RULES, SYSTEM_ROLE_DEFINITION, PLAN_SECTIONS

def build_system_prompt() -> str:
    """Constructs the static system prompt."""
    rules_str = "\n".join([f"- {rule}" for rule in SAFETY_RULES])

    return f"""{SYSTEM_ROLE_DEFINITION}

SAFETY RULES (NON-NEGOTIABLE):
{rules_str}
"""

def build_plan_prompt(location: str, emergency_type: str, size: str, specific_needs: Optional[str] = None) -> str:
    """
    Constructs the user prompt for a generated emergency plan.
    Specific needs are only included when provided.
    """
    sections = "\n".join(f"{i}. {s}" for i, s in enumerate(PLAN_SECTIONS, start=1))
    needs_line = f"Specific Needs: {specific_needs}\n" if specific_needs else ""

    return f"""Create a detailed emergency plan for:
Location: {location}
Type of Emergency: {emergency_type}
Size/Scale: {size}
{needs_line}
Please provide:
{sections}
"""
