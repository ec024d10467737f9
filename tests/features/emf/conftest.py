"""BDD step definitions for metric log features."""

import json
from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from emflog import MetricLog, ValidationError


@dataclass
class EmfScenarioContext:
    """State shared between the steps of one scenario."""

    metric_log: MetricLog | None = None
    documents: list[str] = field(default_factory=list)
    error: ValidationError | None = None

    @property
    def log(self) -> MetricLog:
        assert self.metric_log is not None, "no metric log created"
        return self.metric_log

    @property
    def parsed(self) -> dict[str, Any]:
        assert self.documents, "log was not serialized"
        return json.loads(self.documents[-1])

    @property
    def directive(self) -> dict[str, Any]:
        return self.parsed["_aws"]["CloudWatchMetrics"][0]


def _number(text: str) -> int | float:
    """Parse a step number keeping the int/float distinction."""
    return float(text) if "." in text else int(text)


@pytest.fixture
def ctx() -> EmfScenarioContext:
    """Fresh scenario context for each test."""
    return EmfScenarioContext()


# === Given ===
@given(parsers.parse('a metric log with namespace "{namespace}"'))
def step_metric_log(ctx: EmfScenarioContext, namespace: str) -> None:
    ctx.metric_log = MetricLog(namespace, timestamp=1600000000000)


@given(parsers.parse('a dimension "{key}" with value "{value}"'))
def step_dimension(ctx: EmfScenarioContext, key: str, value: str) -> None:
    ctx.log.put_dimension(key, value)


@given(parsers.parse('a dimension set "{names}"'))
def step_dimension_set(ctx: EmfScenarioContext, names: str) -> None:
    ctx.log.add_dimension_set(names.split(","))


@given("an empty dimension set")
def step_empty_dimension_set(ctx: EmfScenarioContext) -> None:
    ctx.log.add_dimension_set([])


@given(parsers.parse("a dimension set of {n:d} dimensions with values"))
def step_sized_dimension_set(ctx: EmfScenarioContext, n: int) -> None:
    names = [f"Dim{i}" for i in range(n)]
    for name in names:
        ctx.log.put_dimension(name, "Value")
    ctx.log.add_dimension_set(names)


@given(parsers.parse('a metric "{name}" with value {value} and unit "{unit}"'))
def step_metric(ctx: EmfScenarioContext, name: str, value: str, unit: str) -> None:
    ctx.log.put_metric(name, _number(value), unit)


@given(
    parsers.parse(
        'a metric "{name}" with value {value}, unit "{unit}" and resolution {res:d}'
    )
)
def step_metric_with_resolution(
    ctx: EmfScenarioContext, name: str, value: str, unit: str, res: int
) -> None:
    ctx.log.put_metric_with_resolution(name, _number(value), unit, res)


# === When ===
def _serialize(ctx: EmfScenarioContext) -> None:
    try:
        ctx.documents.append(ctx.log.to_json())
    except ValidationError as e:
        ctx.error = e


@when("the log is serialized")
def step_serialize(ctx: EmfScenarioContext) -> None:
    _serialize(ctx)


@when("the log is serialized twice")
def step_serialize_twice(ctx: EmfScenarioContext) -> None:
    _serialize(ctx)
    _serialize(ctx)


# === Then ===
@then("serialization succeeds")
def step_succeeds(ctx: EmfScenarioContext) -> None:
    assert ctx.error is None, str(ctx.error)
    assert ctx.documents


@then(parsers.parse('serialization fails with "{kind}"'))
def step_fails(ctx: EmfScenarioContext, kind: str) -> None:
    assert ctx.error is not None, "expected a validation error"
    assert ctx.error.kind == kind
    assert ctx.documents == []


@then(parsers.parse('the error refers to "{subject}"'))
def step_error_subject(ctx: EmfScenarioContext, subject: str) -> None:
    assert ctx.error is not None
    assert ctx.error.subject == subject
    assert subject in str(ctx.error)


@then(parsers.parse("the error refers to dimension set {index:d}"))
def step_error_index(ctx: EmfScenarioContext, index: int) -> None:
    assert ctx.error is not None
    assert ctx.error.index == index


@then(parsers.parse('the namespace is "{namespace}"'))
def step_namespace(ctx: EmfScenarioContext, namespace: str) -> None:
    assert ctx.directive["Namespace"] == namespace


@then(parsers.parse('the dimensions are "{listing}"'))
def step_dimensions(ctx: EmfScenarioContext, listing: str) -> None:
    expected = [s.split(",") for s in listing.split(";")]
    assert ctx.directive["Dimensions"] == expected


@then(parsers.parse('the metrics are "{listing}"'))
def step_metrics(ctx: EmfScenarioContext, listing: str) -> None:
    expected = []
    for item in listing.split(";"):
        name, unit = item.split(":")
        expected.append({"Name": name, "Unit": unit})
    assert ctx.directive["Metrics"] == expected


@then(parsers.parse('the top-level key "{key}" is "{value}"'))
def step_top_level_string(ctx: EmfScenarioContext, key: str, value: str) -> None:
    assert ctx.parsed[key] == value


@then(parsers.parse('the top-level key "{key}" is the integer {value:d}'))
def step_top_level_int(ctx: EmfScenarioContext, key: str, value: int) -> None:
    assert ctx.parsed[key] == value
    assert isinstance(ctx.parsed[key], int)


@then("both documents are identical")
def step_identical(ctx: EmfScenarioContext) -> None:
    assert len(ctx.documents) == 2
    assert ctx.documents[0] == ctx.documents[1]
