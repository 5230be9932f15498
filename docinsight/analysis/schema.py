"""Typed field descriptors for the analysis result.

The same descriptor tree drives validation/coercion of model replies
(see ``validator.conform``) and the JSON Schema document sent to the model.
"""

from dataclasses import dataclass
from typing import Any

INSIGHT_TYPES = ("win", "risk", "issue", "opportunity")
CHART_TYPES = ("line", "bar", "pie")
WEEKS_PER_PLAN = 4
DEFAULT_SCORE_MAX = 100


@dataclass(frozen=True)
class FieldSpec:
    """One node of the schema tree.

    ``type`` is one of string, number, integer, array or object.
    ``identity`` marks a field an array item is meaningless without: when it
    is missing or empty the whole item is dropped instead of defaulted.
    """

    name: str
    type: str
    required: bool = True
    enum: tuple[str, ...] = ()
    minimum: float | None = None
    maximum: float | None = None
    items: "FieldSpec | None" = None
    fields: tuple["FieldSpec", ...] = ()
    min_items: int | None = None
    max_items: int | None = None
    unique: bool = False
    identity: bool = False
    aliases: tuple[str, ...] = ()
    default: Any = None


def _string(name: str, **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, "string", **kwargs)


def _number(name: str, **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, "number", **kwargs)


def _strings(name: str, **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, "array", items=_string("item"), **kwargs)


def _objects(name: str, *fields: FieldSpec, **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, "array", items=FieldSpec("item", "object", fields=fields), **kwargs)


def analysis_schema(score_max: int = DEFAULT_SCORE_MAX) -> FieldSpec:
    """Build the analysis result schema for the given score scale (10 or 100)."""
    return FieldSpec(
        "analysis",
        "object",
        fields=(
            _string("report_id", aliases=("reportId",)),
            FieldSpec(
                "timeframe",
                "object",
                fields=(_string("start"), _string("end")),
            ),
            _objects(
                "kpis",
                _string("name", identity=True),
                _number("value", identity=True),
                _string("unit", required=False),
                _number("target", required=False),
                _number("delta", required=False),
            ),
            _string("trend_summary", aliases=("trendSummary",)),
            _objects(
                "insights",
                _string("type", enum=INSIGHT_TYPES, default="issue", aliases=("kind",)),
                _string("text", identity=True),
            ),
            _number("score", minimum=0, maximum=score_max, default=0),
            _objects(
                "charts",
                _string("title", identity=True),
                _string("type", enum=CHART_TYPES, default="bar", aliases=("kind",)),
                _objects(
                    "series",
                    _string("name", identity=True),
                    _objects(
                        "points",
                        _string("x", identity=True),
                        _number("y", identity=True),
                    ),
                ),
            ),
            FieldSpec(
                "next_month_plan",
                "object",
                aliases=("nextMonthPlan",),
                fields=(
                    _strings("focus_themes", unique=True, aliases=("focusThemes",)),
                    _objects(
                        "weekly_plan",
                        FieldSpec("week", "integer", minimum=1, maximum=WEEKS_PER_PLAN),
                        _strings("goals"),
                        _strings("metrics"),
                        _string("owner"),
                        min_items=WEEKS_PER_PLAN,
                        max_items=WEEKS_PER_PLAN,
                        aliases=("weeklyPlan",),
                    ),
                    _objects("milestones", _string("title", identity=True), _string("due")),
                    _objects(
                        "risks_mitigations",
                        _string("risk", identity=True),
                        _string("mitigation"),
                        aliases=("risksMitigations",),
                    ),
                ),
            ),
        ),
    )


def to_json_schema(spec: FieldSpec) -> dict[str, Any]:
    """Render a descriptor tree as a JSON Schema document."""
    node: dict[str, Any] = {"type": spec.type}
    if spec.enum:
        node["enum"] = list(spec.enum)
    if spec.minimum is not None:
        node["minimum"] = spec.minimum
    if spec.maximum is not None:
        node["maximum"] = spec.maximum
    if spec.type == "array" and spec.items is not None:
        node["items"] = to_json_schema(spec.items)
        if spec.min_items is not None:
            node["minItems"] = spec.min_items
        if spec.max_items is not None:
            node["maxItems"] = spec.max_items
    if spec.type == "object":
        node["properties"] = {field.name: to_json_schema(field) for field in spec.fields}
        node["required"] = [field.name for field in spec.fields if field.required]
        node["additionalProperties"] = False
    return node
