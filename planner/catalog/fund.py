from typing import Tuple

from ..logic.contracts import PlanStep
from .builders import input_field, select_field

EMERGENCY_FUND_STEPS: Tuple[PlanStep, ...] = (
    PlanStep(
        id=1,
        title="Basic Financial Information",
        fields=(
            select_field("Employment Status", "employmentStatus", [
                ("full-time", "Full-time employed"),
                ("part-time", "Part-time employed"),
                ("self-employed", "Self-employed"),
                ("unemployed", "Currently unemployed"),
                ("retired", "Retired"),
            ]),
            select_field("Income Stability", "incomeStability", [
                ("very-stable", "Very stable"),
                ("stable", "Stable"),
                ("variable", "Variable"),
                ("unstable", "Unstable"),
            ]),
            input_field("Number of Dependents", "dependentsCount", placeholder="e.g., 2"),
        ),
    ),
    PlanStep(
        id=2,
        title="Monthly Expenses (in $)",
        fields=(
            input_field("Housing (Rent/Mortgage)", "housingExpense", placeholder="Monthly amount in $"),
            input_field("Utilities (Electric, Water, Gas)", "utilitiesExpense", placeholder="Monthly amount in $"),
            input_field("Food and Groceries", "foodExpense", placeholder="Monthly amount in $"),
            input_field("Transportation", "transportationExpense", placeholder="Monthly amount in $"),
        ),
    ),
    PlanStep(
        id=3,
        title="Fund Goals and Timeline",
        fields=(
            select_field("Target Fund Size", "targetFundSize", [
                ("3-months", "3 months of expenses"),
                ("6-months", "6 months of expenses"),
                ("9-months", "9 months of expenses"),
                ("12-months", "12 months of expenses"),
            ]),
            select_field("Saving Timeline", "savingTimeline", [
                ("6-months", "6 months"),
                ("1-year", "1 year"),
                ("2-years", "2 years"),
                ("flexible", "Flexible timeline"),
            ]),
            input_field("Monthly Saving Capacity", "monthlySaving", placeholder="Amount you can save monthly in $"),
        ),
    ),
    PlanStep(
        id=4,
        title="Fund Storage and Access",
        fields=(
            select_field("Primary Storage Method", "storageMethod", [
                ("savings", "Savings Account"),
                ("money-market", "Money Market Account"),
                ("high-yield", "High-yield Savings Account"),
                ("mixed", "Mixed Accounts"),
            ]),
            select_field("Access Requirements", "accessRequirements", [
                ("immediate", "Immediate access needed"),
                ("1-3-days", "1-3 days acceptable"),
                ("mixed", "Mixed access times"),
            ]),
            select_field("Risk Tolerance", "riskTolerance", [
                ("very-low", "Very low (Savings only)"),
                ("low", "Low (Mostly savings)"),
                ("moderate", "Moderate (Some investments)"),
            ]),
        ),
    ),
    PlanStep(
        id=5,
        title="Additional Considerations",
        fields=(
            select_field("Insurance Coverage", "insuranceCoverage", [
                ("comprehensive", "Comprehensive coverage"),
                ("basic", "Basic coverage"),
                ("minimal", "Minimal coverage"),
                ("none", "No insurance"),
            ]),
            select_field("Debt Obligations", "debtObligations", [
                ("none", "No debt"),
                ("low", "Low debt"),
                ("moderate", "Moderate debt"),
                ("high", "High debt"),
            ]),
            select_field("Additional Income Sources", "additionalIncome", [
                ("none", "No additional income"),
                ("part-time", "Part-time work available"),
                ("investments", "Investment income"),
                ("multiple", "Multiple sources"),
            ]),
        ),
    ),
)
