"""
RFP draft template.

The draft is a fixed text block with the buyer's goal, scope and budget
substituted in. Evaluation criteria weights and submission instructions are
static.

Design decisions:
- Template is a plain string with {variable} placeholders
- Missing scope/budget render as a literal placeholder rather than blank lines
- No randomness and no external calls - the same request always yields the same draft
"""

from dataclasses import dataclass

from shared.models import RfpRequest


NOT_SPECIFIED = "(not specified)"


@dataclass(frozen=True)
class EvaluationCriterion:
    """A single weighted line in the evaluation criteria section."""
    title: str
    weight: int


EVALUATION_CRITERIA: tuple[EvaluationCriterion, ...] = (
    EvaluationCriterion("Technical fit", 40),
    EvaluationCriterion("Delivery timeline", 20),
    EvaluationCriterion("Cost", 20),
    EvaluationCriterion("Support & SLA", 10),
    EvaluationCriterion("Compliance & Security", 10),
)

SUBMISSION_INSTRUCTIONS = (
    "Provide company profile, references, proposed approach, "
    "cost breakdown, and timeline."
)

RFP_DRAFT_TEMPLATE = """RFP Draft

Goal:
{goal}

Scope:
{scope}

Estimated Budget:
{budget}

Evaluation Criteria:
{criteria}

Submission Instructions:
{instructions}"""


def placeholder_if_empty(value: str) -> str:
    """Return the not-specified placeholder for empty values."""
    return value if value else NOT_SPECIFIED


def format_criteria(criteria: tuple[EvaluationCriterion, ...] = EVALUATION_CRITERIA) -> str:
    """
    Format the numbered evaluation criteria list.

    Returns:
        Lines like "1. Technical fit (40)" joined by newlines
    """
    return "\n".join(
        f"{index}. {criterion.title} ({criterion.weight})"
        for index, criterion in enumerate(criteria, start=1)
    )


def build_rfp_draft(request: RfpRequest) -> str:
    """Render the RFP draft for a goal/scope/budget triple."""
    return RFP_DRAFT_TEMPLATE.format(
        goal=request.goal,
        scope=placeholder_if_empty(request.scope),
        budget=placeholder_if_empty(request.budget),
        criteria=format_criteria(),
        instructions=SUBMISSION_INSTRUCTIONS,
    )
