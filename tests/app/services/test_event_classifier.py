"""Testes do classificador de eventos."""

from __future__ import annotations

import logging

import pytest

from app.constants.events import Role
from app.domain.events import DecodedDescription, EventBuckets, MalformedDescription, RawEvent
from app.services.event_classifier import build_event_buckets, classify, date_key, resolve_role
from utils.errors import FeedDataError, InvalidEventDateError, UnknownRoleError


def _speaker() -> DecodedDescription:
    return DecodedDescription(payload={"role": "speaker", "type": "conference"})


class TestClassify:
    """Testes para classify."""

    @pytest.mark.parametrize("dtstart", ["20240615T090000", "20240615T090000Z", "20240615"])
    def test_start_is_date_key(self, dtstart: str) -> None:
        """DTSTART vira YYYYMMDD."""
        event = classify(RawEvent(start=dtstart), _speaker(), EventBuckets())
        assert event.start == "20240615"

    def test_escaped_comma_in_start_is_replaced_not_dropped(self) -> None:
        """`\\,` vira `,`, então a chave deixa de ter 8 dígitos."""
        with pytest.raises(InvalidEventDateError):
            classify(RawEvent(start="2024\\,0615T09"), _speaker(), EventBuckets())

    def test_unescapes_name_and_location(self) -> None:
        raw = RawEvent(
            start="20240615T090000",
            summary="PyCon UK\\, day 1",
            location="Cardiff\\, UK",
        )
        event = classify(raw, _speaker(), EventBuckets())
        assert event.name == "PyCon UK, day 1"
        assert event.location == "Cardiff, UK"

    def test_absent_fields_become_empty_text(self) -> None:
        description = DecodedDescription(payload={"role": "host"})
        event = classify(RawEvent(start="20240615"), description, EventBuckets())
        assert event.name == ""
        assert event.location == ""
        assert event.type == ""
        assert event.role is Role.HOST

    def test_appends_event_to_role_bucket(self) -> None:
        buckets = EventBuckets()
        event = classify(RawEvent(start="20240615T090000"), _speaker(), buckets)
        assert buckets[Role.SPEAKER] == [event]
        assert buckets[Role.HOST] == []

    def test_unknown_role_is_rejected(self) -> None:
        """Role fora do conjunto conhecido não cria bucket novo."""
        buckets = EventBuckets()
        description = DecodedDescription(payload={"role": "sponsor", "type": "conference"})
        raw = RawEvent(start="20240615T090000", summary="Sponsored\\, talk")

        with pytest.raises(UnknownRoleError) as exc_info:
            classify(raw, description, buckets)

        assert exc_info.value.role == "sponsor"
        assert exc_info.value.summary == "Sponsored, talk"
        assert exc_info.value.start == "20240615"
        assert len(buckets) == 0
        assert set(buckets) == set(Role)

    def test_malformed_description_has_no_role(self) -> None:
        with pytest.raises(UnknownRoleError):
            classify(
                RawEvent(start="20240615T090000"),
                MalformedDescription(original_data="nope"),
                EventBuckets(),
            )

    @pytest.mark.parametrize("dtstart", ["", "2024", "June 15th 2024"])
    def test_invalid_start_is_rejected(self, dtstart: str) -> None:
        with pytest.raises(InvalidEventDateError):
            classify(RawEvent(start=dtstart, summary="Bad date"), _speaker(), EventBuckets())


class TestResolveRole:
    """Testes para resolve_role."""

    @pytest.mark.parametrize("role", list(Role))
    def test_known_roles(self, role: Role) -> None:
        assert resolve_role(role.value, summary="x", start="20240101") is role

    @pytest.mark.parametrize("value", ["", "Speaker", "sponsor"])
    def test_unknown_roles(self, value: str) -> None:
        with pytest.raises(UnknownRoleError):
            resolve_role(value, summary="x", start="20240101")


def test_date_key_drops_time_of_day() -> None:
    assert date_key("20250301T100000") == "20250301"
    assert date_key(None) == ""


class TestBuildEventBuckets:
    """Testes para build_event_buckets."""

    def test_builds_buckets_in_feed_order(self) -> None:
        raw_events = [
            RawEvent(
                start="20250301T100000",
                summary="Conf A",
                description='{\\n"role": "speaker"\\,\\n"type": "conference"\\n}',
            ),
            RawEvent(start="20250201T100000", summary="Meetup B", description='{"role": "host"}'),
            RawEvent(start="20250101T100000", summary="Conf C", description='{"role": "speaker"}'),
        ]

        buckets = build_event_buckets(raw_events)

        assert [event.name for event in buckets[Role.SPEAKER]] == ["Conf A", "Conf C"]
        assert [event.name for event in buckets[Role.HOST]] == ["Meetup B"]
        assert buckets[Role.SPEAKER][0].type == "conference"

    def test_malformed_description_is_logged_then_reported(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        raw_events = [
            RawEvent(start="20250301T100000", summary="Good", description='{"role": "booth"}'),
            RawEvent(start="20250302T100000", summary="Broken", description="role=speaker"),
        ]

        with caplog.at_level(logging.WARNING), pytest.raises(FeedDataError) as exc_info:
            build_event_buckets(raw_events)

        assert exc_info.value.summary == "Broken"
        fallback_records = [r for r in caplog.records if getattr(r, "fallback_used", False)]
        assert len(fallback_records) == 1
        assert fallback_records[0].component == "description_decoder"
        assert fallback_records[0].summary == "Broken"
