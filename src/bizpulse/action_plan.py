"""
90-Day Action Plan — fixed 12-week template schedule.

The basic plan is a template: weeks 1, 2, 3, 4, 6, 8, 10 and 12, two actions
each, whatever recommendations were generated. The detailed plan covers all
twelve weeks and schedules playbook tactics in weeks 3 and 5.
``normalize_action_plan`` upgrades the minimal week shape to the detailed
one used by exporters.
"""

from __future__ import annotations

from collections.abc import Sequence

from bizpulse.models.analysis import (
    ActionPlanWeek,
    Area,
    DetailedActionPlanWeek,
    DetailedWeekAction,
    PlanWeek,
    Priority,
    Recommendation,
    WeekAction,
)

UNDEFINED = "To be defined"

# week -> [(action, owner, deliverable, area), ...]
_TEMPLATE: tuple[tuple[int, tuple[tuple[str, str, str, str], ...]], ...] = (
    # Weeks 1-2: quick wins and diagnosis
    (1, (
        ("Alignment meeting with leadership on the diagnosis", "CEO/Director",
         "Presentation of the diagnosis and priorities", "Strategy"),
        ("Detailed survey of costs and margins per product/service", "Finance",
         "ABC profitability spreadsheet", "Finance"),
    )),
    (2, (
        ("Map the current sales funnel", "Sales",
         "Document with stages and conversion rates", "Commercial"),
        ("Quick satisfaction survey with key customers", "Sales/CS",
         "Qualitative feedback report", "Commercial"),
    )),
    # Weeks 3-4: first implementations
    (3, (
        ("Define priority KPIs per area", "Managers",
         "KPI list with targets and owners", "Operations"),
        ("Start rolling out funnel improvements", "Sales",
         "New documented process", "Commercial"),
    )),
    (4, (
        ("Review credit and collection policy", "Finance",
         "New documented policy", "Finance"),
        ("First KPI follow-up meeting", "CEO/Managers",
         "Initial tracking dashboard", "Operations"),
    )),
    # Weeks 5-8: consolidation
    (6, (
        ("Evaluate results of the first actions", "CEO",
         "Progress report", "Strategy"),
        ("Train the sales team on the new process", "Sales",
         "Team trained and certified", "Commercial"),
    )),
    (8, (
        ("Roll out the management dashboard", "IT/Management",
         "Working dashboard", "Technology"),
        ("Review the organizational structure", "HR/CEO",
         "Updated org chart", "People"),
    )),
    # Weeks 9-12: optimization and scale
    (10, (
        ("ROI analysis of the initiatives implemented", "Finance",
         "ROI report", "Finance"),
        ("Organizational climate survey", "HR",
         "Climate report", "People"),
    )),
    (12, (
        ("Quarterly results review", "CEO/Board",
         "Q1 results presentation", "Strategy"),
        ("Plan the next 90-day cycle", "CEO/Managers",
         "Q2 plan defined", "Strategy"),
    )),
)


def generate_action_plan(recommendations: Sequence[Recommendation]) -> list[ActionPlanWeek]:
    """Return the 90-day template schedule.

    ``recommendations`` is accepted for interface stability; the schedule
    does not depend on it.
    """
    return [
        ActionPlanWeek(
            week=week,
            actions=[
                WeekAction(action=action, owner=owner, deliverable=deliverable, area=area)
                for action, owner, deliverable, area in actions
            ],
        )
        for week, actions in _TEMPLATE
    ]


def phase_for_week(week: int) -> str:
    if week <= 2:
        return "Diagnosis"
    if week <= 4:
        return "Quick Wins"
    if week <= 8:
        return "Structuring"
    if week <= 11:
        return "Execution"
    return "Closing"


def upgrade_week(week: PlanWeek) -> DetailedActionPlanWeek:
    """Upgrade a minimal week to the detailed shape; detailed weeks pass through."""
    if isinstance(week, DetailedActionPlanWeek):
        return week
    return DetailedActionPlanWeek(
        week=week.week,
        phase=phase_for_week(week.week),
        objective=f"Week {week.week}",
        actions=[
            DetailedWeekAction(
                action=a.action,
                owner=a.owner,
                deliverable=a.deliverable,
                resources=a.resources or UNDEFINED,
                metrics=a.metrics or UNDEFINED,
            )
            for a in week.actions
        ],
    )


def normalize_action_plan(plan: Sequence[PlanWeek]) -> list[DetailedActionPlanWeek]:
    return [upgrade_week(week) for week in plan]


# ---------------------------------------------------------------------------
# Detailed 12-week plan, built around the tactical playbook.
# ---------------------------------------------------------------------------

_OWNER_BY_AREA = {
    Area.COMMERCIAL: "Sales Manager",
    Area.MARKETING: "Marketing Manager",
    Area.FINANCIAL: "Finance Manager",
    Area.PEOPLE: "HR Manager",
}
_DEFAULT_OWNER = "IT Manager"

QUICK_WIN_SLOTS = 3
STRUCTURING_SLOTS = 2

# week -> (phase, objective, [(action, owner, deliverable, resources, metrics), ...])
# Weeks 3 and 5 are filled from the tactics.
_DETAILED_TEMPLATE: dict[int, tuple[str, str, tuple[tuple[str, str, str, str, str], ...]]] = {
    1: ("Diagnosis", "Map the current situation and identify quick wins", (
        ("Kick-off meeting with leadership to present the diagnosis", "CEO/Director",
         "Priorities and expectations aligned", "Diagnosis presentation",
         "All leaders attend"),
        ("Collect complementary data (finance, sales, HR)", "Area managers",
         "Consolidated indicator spreadsheet", "System access",
         "6 months of data collected"),
        ("Identify and rank 3 high-impact quick wins", "CEO/Director",
         "Ranked list with owners", "Impact x effort matrix",
         "Quick wins defined"),
    )),
    2: ("Planning", "Set OKRs and structure the priority initiatives", (
        ("Quarterly OKR workshop", "CEO + Leadership",
         "3 company OKRs with measurable key results", "OKR template",
         "OKRs approved by everyone"),
        ("Cascade the OKRs to each area", "Area managers",
         "Area OKRs aligned with the company's", "Meeting with each area",
         "Area OKRs defined"),
        ("Build a detailed schedule of the priority initiatives", "PMO/Project manager",
         "Schedule with milestones and owners", "Project management tool",
         "Schedule approved"),
    )),
    3: ("Quick Wins", "Deliver improvements with immediate impact", ()),
    4: ("Quick Wins", "Finish the quick wins and measure the first results", (
        ("Finish rolling out the quick wins", "Assigned owners",
         "Quick wins in operation", "Per initiative",
         "All quick wins implemented"),
        ("First results measurement", "Area managers",
         "Initial results report", "Metrics dashboard",
         "Change vs baseline"),
        ("First-month review meeting", "CEO",
         "Minutes with lessons and adjustments", "Performance data",
         "Decisions documented"),
    )),
    5: ("Structuring", "Put the priority processes and systems in place", ()),
    6: ("Structuring", "Train and upskill the team", (
        ("Training on the new methods and tools", "HR + Managers",
         "Team trained", "Training material",
         "80% of the team trained"),
        ("Document the new processes", "Process owners",
         "Processes documented", "Wiki/knowledge base",
         "Critical processes documented"),
    )),
    7: ("Structuring", "Consolidate what was implemented and adjust", (
        ("Fine-tune the rollouts based on feedback", "Initiative owners",
         "Improvements in place", "Team feedback",
         "Issues resolved"),
        ("Set up tracking dashboards", "IT/BI",
         "Operational dashboard", "BI tool",
         "KPIs visible in real time"),
    )),
    8: ("Structuring", "Second-month review and preparation to scale", (
        ("Second-month review meeting", "CEO + Leadership",
         "OKR progress analysis", "Performance data",
         "OKRs on track"),
        ("Plan how to scale the successful initiatives", "CEO",
         "Scale-up plan", "Initiative results",
         "Initiatives to scale selected"),
    )),
    9: ("Execution", "Scale the successful initiatives", (
        ("Extend the successful initiatives company-wide", "Area managers",
         "Initiatives scaled", "Extra resources if needed",
         "100% coverage"),
        ("Start the next initiatives in the backlog", "Assigned owners",
         "New initiatives under way", "As planned",
         "Initiatives started"),
    )),
    10: ("Execution", "Continuous optimization", (
        ("Analyze the data and find optimizations", "Analysts/BI",
         "Insights report", "Accumulated data",
         "Opportunities identified"),
        ("Roll out the high-impact optimizations", "Area owners",
         "Improvements in place", "Data-driven",
         "Incremental gain"),
    )),
    11: ("Execution", "Prepare the next cycle", (
        ("Collect feedback from the whole team", "HR",
         "Satisfaction survey", "Feedback form",
         "Participation above 80%"),
        ("Document the quarter's lessons learned", "Managers",
         "Lessons learned document", "Retrospective meetings",
         "Lessons documented"),
    )),
    12: ("Closing", "Final review and planning of the next quarter", (
        ("Quarter closing meeting with results", "CEO",
         "Results presentation", "Consolidated data",
         "OKRs achieved"),
        ("Celebrate achievements and recognize the team", "CEO + HR",
         "Recognition event", "Celebration budget",
         "Team engagement"),
        ("Set the next quarter's OKRs", "CEO + Leadership",
         "Next-quarter OKRs defined", "Quarter lessons",
         "Cycle continuity"),
    )),
}


def owner_for_area(area: Area) -> str:
    return _OWNER_BY_AREA.get(area, _DEFAULT_OWNER)


def _quick_win(tactic: Recommendation) -> DetailedWeekAction:
    return DetailedWeekAction(
        action=tactic.title,
        owner=owner_for_area(tactic.area),
        deliverable=tactic.steps[0] if tactic.steps else "Rollout started",
        resources=tactic.resources,
        metrics=tactic.metrics[0] if tactic.metrics else "Measurable improvement",
    )


def _structuring_kickoff(tactic: Recommendation) -> DetailedWeekAction:
    return DetailedWeekAction(
        action=f"Start: {tactic.title}",
        owner=owner_for_area(tactic.area),
        deliverable="Project started with a schedule",
        resources=tactic.resources,
        metrics="Project milestones defined",
    )


def generate_detailed_action_plan(tactics: Sequence[Recommendation]) -> list[DetailedActionPlanWeek]:
    """Build the detailed 12-week plan.

    Week 3 carries the first three high-priority tactics as quick wins and
    week 5 kicks off the first two medium-priority ones. Those weeks are
    empty when there is no tactic of that priority. Every other week is
    fixed.
    """
    high = [t for t in tactics if t.priority == Priority.HIGH][:QUICK_WIN_SLOTS]
    medium = [t for t in tactics if t.priority == Priority.MEDIUM][:STRUCTURING_SLOTS]
    derived = {
        3: [_quick_win(t) for t in high],
        5: [_structuring_kickoff(t) for t in medium],
    }

    plan: list[DetailedActionPlanWeek] = []
    for week, (phase, objective, actions) in _DETAILED_TEMPLATE.items():
        if week in derived:
            week_actions = derived[week]
        else:
            week_actions = [
                DetailedWeekAction(
                    action=action, owner=owner, deliverable=deliverable, resources=resources, metrics=metrics
                )
                for action, owner, deliverable, resources, metrics in actions
            ]
        plan.append(DetailedActionPlanWeek(week=week, phase=phase, objective=objective, actions=week_actions))
    return plan
