from rest_framework import serializers

from ..config import MAX_QUEUE_LIMIT
from ..data.models import ReviewItem
from ..domain.enums import SourceType


class RegisterItemInSerializer(serializers.Serializer):
    course_id = serializers.UUIDField(required=False, allow_null=True)
    source_type = serializers.ChoiceField(choices=SourceType.choices)
    source_id = serializers.UUIDField()


class RateInSerializer(serializers.Serializer):
    # Vocabulary is checked by the scheduler so legacy ratings can be toggled
    rating = serializers.CharField(max_length=16)


class QueueQuerySerializer(serializers.Serializer):
    filter = serializers.CharField(required=False, default="all")
    as_of = serializers.DateField(required=False)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=MAX_QUEUE_LIMIT)


class AsOfQuerySerializer(serializers.Serializer):
    as_of = serializers.DateField(required=False)


class RatingEventSerializer(serializers.Serializer):
    item_id = serializers.UUIDField()
    rating = serializers.CharField(max_length=16)


class SessionSummaryInSerializer(serializers.Serializer):
    ratings = RatingEventSerializer(many=True, allow_empty=True)
    save_summary = serializers.BooleanField(required=False, default=False)


class ReviewItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = ReviewItem
        fields = [
            "id", "owner_id", "course_id", "source_type", "source_id", "box",
            "next_review_at", "last_reviewed_at", "status", "created_at",
        ]
        read_only_fields = fields
