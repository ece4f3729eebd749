"""Prompt templates for narrative advice and the fallbacks used when it fails"""

from dhan_advisor.domain.models import ApplicantProfile, BudgetPlan, BudgetProfile, EligibilityResult, SavingsGoal

LOAN_ADVICE_FALLBACK = "Consult a bank representative for personalized loan advice."
INVESTMENT_ADVICE_FALLBACK = "Consult a financial advisor for personalized investment advice."
BUDGET_ADVICE_FALLBACK = "Track your monthly expenses and aim to save at least 20% of your income."
BUSINESS_IDEAS_FALLBACK = (
    "Start with a low-capital business built on your existing skills, and check the "
    "Stand Up India and MUDRA schemes for startup funding."
)

LAKH = 100_000


def loan_advice_prompt(profile: ApplicantProfile, result: EligibilityResult) -> str:
    return (
        "Provide detailed loan advice for a woman entrepreneur:\n"
        f"- Annual Income: ₹{profile.income}\n"
        f"- Age: {profile.age} years\n"
        f"- Business Type: {profile.business_type}\n"
        f"- Eligibility Score: {int(result.score)}/100\n"
        f"- Max Loan Amount: ₹{result.max_loan_amount // LAKH} lakhs\n"
        "\n"
        "Provide:\n"
        "1. Loan strategy\n"
        "2. Required documents\n"
        "3. Application process\n"
        "4. Tips to improve eligibility\n"
        "5. Alternative financing options\n"
        "6. Timeline expectations"
    )


def investment_advice_prompt(goal: SavingsGoal, monthly_contribution: float) -> str:
    return (
        "Create investment plan for a woman:\n"
        f"- Target Amount: ₹{goal.target_amount // LAKH} lakhs\n"
        f"- Timeframe: {goal.timeframe_months // 12} years\n"
        f"- Monthly Investment: ₹{int(monthly_contribution)}\n"
        f"- Risk Profile: {goal.risk_appetite.value}\n"
        "\n"
        "Provide:\n"
        "1. Investment strategy\n"
        "2. Specific fund recommendations\n"
        "3. Tax-saving options (80C, etc.)\n"
        "4. Risk mitigation\n"
        "5. Review frequency"
    )


def budget_advice_prompt(profile: BudgetProfile, plan: BudgetPlan) -> str:
    return (
        "Create monthly budget plan:\n"
        f"- Income: ₹{plan.income:.0f}\n"
        f"- Expenses: ₹{plan.expenses:.0f}\n"
        f"- Savings: ₹{plan.monthly_savings:.0f} ({plan.savings_rate_percent}%)\n"
        f"- Current Savings: ₹{profile.savings:.0f}\n"
        f"- Current Investments: ₹{profile.investments:.0f}\n"
        "\n"
        "Provide:\n"
        "1. Budget breakdown (50/30/20 rule)\n"
        "2. Areas to reduce expenses\n"
        "3. Savings improvement tips\n"
        "4. Emergency fund recommendation\n"
        "5. Debt repayment strategy"
    )


def business_ideas_prompt(skills: str, budget: int) -> str:
    return (
        f"Woman with these skills: {skills}\n"
        f"Available budget: ₹{budget // LAKH} lakhs\n"
        "\n"
        "Suggest TOP 5 viable business ideas:\n"
        "\n"
        "For each idea provide:\n"
        "1. Business name/type\n"
        "2. Initial capital required\n"
        "3. Monthly operational cost\n"
        "4. Expected monthly revenue (realistic)\n"
        "5. Profit margin\n"
        "6. Market demand (High/Medium/Low)\n"
        "7. Competition level\n"
        "8. Required resources/training\n"
        "9. Success story example\n"
        "10. Government scheme applicable\n"
        "\n"
        "Prioritize low-capital, high-demand businesses suitable for women."
    )
