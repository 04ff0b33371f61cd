"""Serializers for turning raw JSON data into domain models and back.

Input serializers validate at the construction boundary and build immutable
domain records through ``save()``. An unrecognized play type is not a
validation error: it surfaces as UnknownPlayTypeError.
"""

from collections.abc import Mapping
from typing import Any

from rest_framework import serializers

from theater.domain import Invoice, Performance, Play, PlayType


class PlaySerializer(serializers.Serializer):
    """Serializer for Play domain model."""

    name = serializers.CharField()
    type = serializers.CharField()

    def validate_type(self, value: str) -> PlayType:
        return PlayType.from_string(value)

    def create(self, validated_data: dict[str, Any]) -> Play:
        return Play(**validated_data)

    def to_representation(self, instance: Play) -> dict[str, Any]:
        return {"name": instance.name, "type": instance.type.value}


class PerformanceSerializer(serializers.Serializer):
    """Serializer for Performance domain model."""

    playID = serializers.CharField(source="play_id")
    audience = serializers.IntegerField(min_value=0)

    def create(self, validated_data: dict[str, Any]) -> Performance:
        return Performance.of(validated_data["play_id"], validated_data["audience"])


class InvoiceSerializer(serializers.Serializer):
    """Serializer for Invoice domain model."""

    customer = serializers.CharField()
    performances = PerformanceSerializer(many=True, allow_empty=True)

    def create(self, validated_data: dict[str, Any]) -> Invoice:
        performances = tuple(
            Performance.of(item["play_id"], item["audience"])
            for item in validated_data["performances"]
        )
        return Invoice(customer=validated_data["customer"], performances=performances)


class StatementLineSerializer(serializers.Serializer):
    """Serializer for StatementLine results."""

    play_name = serializers.CharField()
    amount = serializers.IntegerField()
    audience = serializers.IntegerField()


class StatementSerializer(serializers.Serializer):
    """Serializer for Statement results.

    Pass ``format_amount`` in the context to control the ``total`` string.
    """

    customer = serializers.CharField()
    lines = StatementLineSerializer(many=True)
    total_amount = serializers.IntegerField()
    volume_credits = serializers.IntegerField()
    total = serializers.SerializerMethodField()

    def get_total(self, statement) -> str:
        format_amount = self.context["format_amount"]
        return format_amount(statement.total_amount)


def load_plays(data: Any) -> dict[str, Play]:
    """Build a play id -> Play mapping from ``{id: {"name", "type"}}`` data.

    Raises:
        ValidationError: If the data is malformed.
        UnknownPlayTypeError: If a play has an unrecognized type.
    """
    if not isinstance(data, Mapping):
        raise serializers.ValidationError("Plays must be an object keyed by play id")
    plays = {}
    for play_id, raw in data.items():
        serializer = PlaySerializer(data=raw)
        serializer.is_valid(raise_exception=True)
        plays[play_id] = serializer.save()
    return plays


def load_invoice(data: Any) -> Invoice:
    """Build an Invoice from ``{"customer", "performances": [...]}`` data.

    Raises:
        ValidationError: If the data is malformed.
    """
    serializer = InvoiceSerializer(data=data)
    serializer.is_valid(raise_exception=True)
    return serializer.save()
