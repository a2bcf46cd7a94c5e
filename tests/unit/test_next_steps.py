"""Unit tests for the event next-steps checklist."""

import json

import pytest

from jobtracker.services.next_steps import (
    NextStep,
    all_completed,
    dump_steps,
    load_steps,
    parse_steps,
    toggle_step,
)


@pytest.mark.unit
def test_parse_stored_checklist():
    steps = parse_steps('[{"text": "Send thank-you note", "completed": true}, {"text": "Prepare demo"}]')

    assert steps == [
        NextStep(text="Send thank-you note", completed=True),
        NextStep(text="Prepare demo", completed=False),
    ]


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["not json", '{"text": "x"}', '[{"completed": true}]'])
def test_parse_rejects_malformed_values(raw):
    with pytest.raises(ValueError):
        parse_steps(raw)


@pytest.mark.unit
def test_load_treats_empty_and_malformed_as_no_checklist():
    assert load_steps(None) is None
    assert load_steps("") is None
    assert load_steps("[broken") is None


@pytest.mark.unit
def test_dump_accepts_models_and_dicts():
    raw = dump_steps([NextStep(text="Email recruiter"), {"text": "Update tracker", "completed": True}])

    assert json.loads(raw) == [
        {"text": "Email recruiter", "completed": False},
        {"text": "Update tracker", "completed": True},
    ]
    assert dump_steps(None) is None


@pytest.mark.unit
def test_all_completed_requires_a_non_empty_list():
    assert not all_completed(None)
    assert not all_completed([])
    assert not all_completed([NextStep(text="a", completed=True), NextStep(text="b")])
    assert all_completed([NextStep(text="a", completed=True)])


@pytest.mark.unit
def test_toggle_returns_new_list():
    steps = [NextStep(text="a"), NextStep(text="b")]

    toggled = toggle_step(steps, 1)

    assert toggled[1].completed
    assert not steps[1].completed
    assert not toggle_step(toggled, 1)[1].completed


@pytest.mark.unit
@pytest.mark.parametrize("index", [-1, 2])
def test_toggle_out_of_range(index):
    with pytest.raises(IndexError):
        toggle_step([NextStep(text="a"), NextStep(text="b")], index)
