from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Timeframe:
    start: str = ""
    end: str = ""


@dataclass(frozen=True)
class Kpi:
    """A single key performance indicator."""

    name: str
    value: float
    unit: str | None = None
    target: float | None = None
    delta: float | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "value": self.value}
        for key in ("unit", "target", "delta"):
            if getattr(self, key) is not None:
                data[key] = getattr(self, key)
        return data


@dataclass(frozen=True)
class Insight:
    """A finding classified as win, risk, issue or opportunity."""

    kind: str
    text: str


@dataclass(frozen=True)
class ChartPoint:
    x: str
    y: float


@dataclass(frozen=True)
class ChartSeries:
    name: str
    points: list[ChartPoint] = field(default_factory=list)


@dataclass(frozen=True)
class Chart:
    title: str
    kind: str
    series: list[ChartSeries] = field(default_factory=list)


@dataclass(frozen=True)
class WeeklyPlanEntry:
    week: int
    goals: list[str] = field(default_factory=list)
    metrics: list[str] = field(default_factory=list)
    owner: str = ""


@dataclass(frozen=True)
class Milestone:
    title: str
    due: str = ""


@dataclass(frozen=True)
class RiskMitigation:
    risk: str
    mitigation: str = ""


@dataclass(frozen=True)
class NextMonthPlan:
    focus_themes: list[str] = field(default_factory=list)
    weekly_plan: list[WeeklyPlanEntry] = field(default_factory=list)
    milestones: list[Milestone] = field(default_factory=list)
    risks_mitigations: list[RiskMitigation] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisResult:
    """Schema-conformant structured analysis of one report corpus."""

    report_id: str = ""
    timeframe: Timeframe = field(default_factory=Timeframe)
    kpis: list[Kpi] = field(default_factory=list)
    trend_summary: str = ""
    insights: list[Insight] = field(default_factory=list)
    score: float = 0
    charts: list[Chart] = field(default_factory=list)
    next_month_plan: NextMonthPlan = field(default_factory=NextMonthPlan)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisResult":
        """Build from a payload that already conforms to the analysis schema."""
        plan = data["next_month_plan"]
        return cls(
            report_id=data["report_id"],
            timeframe=Timeframe(**data["timeframe"]),
            kpis=[Kpi(**kpi) for kpi in data["kpis"]],
            trend_summary=data["trend_summary"],
            insights=[Insight(kind=i["type"], text=i["text"]) for i in data["insights"]],
            score=data["score"],
            charts=[
                Chart(
                    title=chart["title"],
                    kind=chart["type"],
                    series=[
                        ChartSeries(
                            name=series["name"],
                            points=[ChartPoint(**point) for point in series["points"]],
                        )
                        for series in chart["series"]
                    ],
                )
                for chart in data["charts"]
            ],
            next_month_plan=NextMonthPlan(
                focus_themes=list(plan["focus_themes"]),
                weekly_plan=_weekly_plan(plan["weekly_plan"]),
                milestones=[Milestone(**m) for m in plan["milestones"]],
                risks_mitigations=[RiskMitigation(**r) for r in plan["risks_mitigations"]],
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the snake_case keys the dashboard renderers read."""
        plan = self.next_month_plan
        return {
            "report_id": self.report_id,
            "timeframe": {"start": self.timeframe.start, "end": self.timeframe.end},
            "kpis": [kpi.to_dict() for kpi in self.kpis],
            "trend_summary": self.trend_summary,
            "insights": [{"type": i.kind, "text": i.text} for i in self.insights],
            "score": self.score,
            "charts": [
                {
                    "title": chart.title,
                    "type": chart.kind,
                    "series": [
                        {
                            "name": series.name,
                            "points": [{"x": p.x, "y": p.y} for p in series.points],
                        }
                        for series in chart.series
                    ],
                }
                for chart in self.charts
            ],
            "next_month_plan": {
                "focus_themes": list(plan.focus_themes),
                "weekly_plan": [
                    {
                        "week": entry.week,
                        "goals": list(entry.goals),
                        "metrics": list(entry.metrics),
                        "owner": entry.owner,
                    }
                    for entry in plan.weekly_plan
                ],
                "milestones": [{"title": m.title, "due": m.due} for m in plan.milestones],
                "risks_mitigations": [
                    {"risk": r.risk, "mitigation": r.mitigation} for r in plan.risks_mitigations
                ],
            },
        }


def _weekly_plan(entries: list[dict[str, Any]]) -> list[WeeklyPlanEntry]:
    # Weeks are positional, whatever numbering the model used.
    return [
        WeeklyPlanEntry(
            week=week,
            goals=list(entry["goals"]),
            metrics=list(entry["metrics"]),
            owner=entry["owner"],
        )
        for week, entry in enumerate(entries, start=1)
    ]


@dataclass(frozen=True)
class AnalysisOutcome:
    """Analysis of one corpus as stored on a report."""

    result: AnalysisResult
    markdown: str
    used_sample: bool = False
