from docinsight.analysis.models import AnalysisResult
from docinsight.analysis.schema import DEFAULT_SCORE_MAX

_FOOTER = (
    "*This analysis was generated automatically. Please review the detailed tabs "
    "for comprehensive insights and action plans.*"
)


def render_markdown_summary(result: AnalysisResult, score_max: int = DEFAULT_SCORE_MAX) -> str:
    """Render the executive summary shown above the dashboard tabs."""
    kpis = "\n".join(_kpi_line(kpi.name, kpi.value, kpi.unit, kpi.delta) for kpi in result.kpis)
    insights = "\n".join(
        f"- **{insight.kind.upper()}**: {insight.text}" for insight in result.insights
    )
    themes = "\n".join(f"- {theme}" for theme in result.next_month_plan.focus_themes)
    sections = [
        "# Executive Summary",
        f"## Overall Performance Score: {_number(result.score)}/{score_max}",
        result.trend_summary or "Analysis data not available.",
        "## Key Performance Indicators",
        kpis or "No KPIs identified.",
        "## Key Insights",
        insights or "No insights identified.",
        "## Next Month Focus",
        themes or "No specific themes identified.",
        "---",
        _FOOTER,
    ]
    return "\n\n".join(sections)


def _kpi_line(name: str, value: float, unit: str | None, delta: float | None) -> str:
    line = f"- **{name}**: {_number(value)}"
    if unit:
        line += f" {unit}"
    if delta:
        line += " ↗️" if delta > 0 else " ↘️"
    return line


def _number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
