"""Goal decomposition, plan building and the executor-facing plan contract."""

from .classifier import classify
from .consumer import CursorState, PlanCursor, StepExecutor, StepOutcome, run_plan
from .difficulty import DifficultyWarning, Severity, analyze_difficulty, max_severity
from .plan import CraftingPlan, Step, build_continuation_chain, build_plan, flatten
from .resolver import DependencyResolver
from .rule_index import RuleIndex, index_rules
from .steps import DependencyNode, StepKind, render_tree

__all__ = [
    "CraftingPlan",
    "CursorState",
    "DependencyNode",
    "DependencyResolver",
    "DifficultyWarning",
    "PlanCursor",
    "RuleIndex",
    "Severity",
    "Step",
    "StepExecutor",
    "StepKind",
    "StepOutcome",
    "analyze_difficulty",
    "build_continuation_chain",
    "build_plan",
    "classify",
    "flatten",
    "index_rules",
    "max_severity",
    "render_tree",
    "run_plan",
]
