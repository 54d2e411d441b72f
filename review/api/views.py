from rest_framework import views, status
from rest_framework.exceptions import NotAuthenticated
from rest_framework.response import Response
import structlog
import uuid
from ..domain.enums import RATING_LABELS
from ..domain.errors import (
    DuplicateActiveItem,
    InvalidFilter,
    InvalidRating,
    NotFound,
    ReviewError,
    StoreUnavailable,
)
from ..services.ingestion import register_review_item
from ..services.queue import build_queue, get_review_summary_counts
from ..services.reviews import (
    get_review_item,
    legacy_ratings_enabled,
    rate_item,
    resume_item,
    suspend_item,
)
from ..services.summary import save_session_summary, summarize_session
from .serializers import (
    AsOfQuerySerializer,
    QueueQuerySerializer,
    RateInSerializer,
    RegisterItemInSerializer,
    ReviewItemSerializer,
    SessionSummaryInSerializer,
)

base_logger = structlog.get_logger()

ERROR_STATUS = {
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidRating: status.HTTP_400_BAD_REQUEST,
    InvalidFilter: status.HTTP_400_BAD_REQUEST,
    DuplicateActiveItem: status.HTTP_409_CONFLICT,
    StoreUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class ReviewAPIView(views.APIView):
    """Owner-scoped base view: the owner is always the authenticated learner."""

    def initial(self, request, *args, **kwargs):
        # Create a unique request_id
        self.request_id = str(uuid.uuid4())
        self.logger = base_logger.bind(request_id=self.request_id)
        super().initial(request, *args, **kwargs)
        if not request.user or not request.user.is_authenticated:
            raise NotAuthenticated()

    @property
    def owner_id(self):
        return self.request.user.id

    def handle_exception(self, exc):
        if isinstance(exc, NotAuthenticated):
            return Response(
                {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
            )
        if isinstance(exc, ReviewError):
            status_code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
            self.logger.warning("review_api_error",
                error=exc.code,
                detail=str(exc),
                status=status_code,
            )
            return Response({"error": str(exc), "code": exc.code}, status=status_code)
        return super().handle_exception(exc)


class ReviewItemListView(ReviewAPIView):
    def post(self, request):
        s = RegisterItemInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        item, created = register_review_item(
            self.owner_id,
            s.validated_data.get("course_id"),
            s.validated_data["source_type"],
            s.validated_data["source_id"],
        )
        status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK

        self.logger.info(
            "register_api_response",
            owner_id=str(self.owner_id),
            item_id=str(item.id),
            created=created,
            status=status_code,
        )
        return Response(ReviewItemSerializer(item).data, status=status_code)


class ReviewItemDetailView(ReviewAPIView):
    def get(self, request, item_id):
        item = get_review_item(self.owner_id, item_id)
        return Response(ReviewItemSerializer(item).data)


class RateItemView(ReviewAPIView):
    def post(self, request, item_id):
        s = RateInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        rating = s.validated_data["rating"]

        item = rate_item(self.owner_id, item_id, rating)

        self.logger.info(
            "rate_api_response",
            owner_id=str(self.owner_id),
            item_id=str(item.id),
            rating=rating,
            box=item.box,
            next_review_at=item.next_review_at.isoformat(),
        )
        data = ReviewItemSerializer(item).data
        data["rating_label"] = RATING_LABELS[rating]
        return Response(data, status=status.HTTP_200_OK)


class SuspendItemView(ReviewAPIView):
    def post(self, request, item_id):
        item = suspend_item(self.owner_id, item_id)
        return Response(ReviewItemSerializer(item).data)


class ResumeItemView(ReviewAPIView):
    def post(self, request, item_id):
        item = resume_item(self.owner_id, item_id)
        return Response(ReviewItemSerializer(item).data)


class SummaryCountsView(ReviewAPIView):
    def get(self, request):
        qs = AsOfQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)

        counts = get_review_summary_counts(self.owner_id, qs.validated_data.get("as_of"))
        counts["top_items"] = ReviewItemSerializer(counts["top_items"], many=True).data
        return Response(counts)


class ReviewQueueView(ReviewAPIView):
    def get(self, request):
        qs = QueueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)

        items = build_queue(
            self.owner_id,
            qs.validated_data["filter"],
            as_of=qs.validated_data.get("as_of"),
            limit=qs.validated_data.get("limit"),
        )

        self.logger.info(
            "queue_api_response",
            owner_id=str(self.owner_id),
            filter=qs.validated_data["filter"],
            item_count=len(items),
        )
        return Response(
            {
                "filter": qs.validated_data["filter"],
                "items": ReviewItemSerializer(items, many=True).data,
            }
        )


class SessionSummaryView(ReviewAPIView):
    def post(self, request):
        s = SessionSummaryInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        summary = summarize_session(
            s.validated_data["ratings"], allow_legacy=legacy_ratings_enabled()
        )
        body = summary.as_dict()
        status_code = status.HTTP_200_OK
        if s.validated_data["save_summary"]:
            record = save_session_summary(self.owner_id, summary)
            body["record_id"] = str(record.id)
            status_code = status.HTTP_201_CREATED

        self.logger.info(
            "session_summary_api_response",
            owner_id=str(self.owner_id),
            total=summary.total,
            rollover_count=summary.rollover_count,
            saved=s.validated_data["save_summary"],
        )
        return Response(body, status=status_code)
