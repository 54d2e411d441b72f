from django.urls import path
from .views import (
    RateItemView,
    ResumeItemView,
    ReviewItemDetailView,
    ReviewItemListView,
    ReviewQueueView,
    SessionSummaryView,
    SummaryCountsView,
    SuspendItemView,
)

urlpatterns = [
    path("review-items", ReviewItemListView.as_view(), name="review-items"),
    path("review-items/summary-counts", SummaryCountsView.as_view(), name="review-summary-counts"),
    path("review-items/<uuid:item_id>", ReviewItemDetailView.as_view(), name="review-item"),
    path("review-items/<uuid:item_id>/rate", RateItemView.as_view(), name="review-item-rate"),
    path("review-items/<uuid:item_id>/suspend", SuspendItemView.as_view(), name="review-item-suspend"),
    path("review-items/<uuid:item_id>/resume", ResumeItemView.as_view(), name="review-item-resume"),
    path("review-queue", ReviewQueueView.as_view(), name="review-queue"),
    path("review-sessions/summary", SessionSummaryView.as_view(), name="review-session-summary"),
]
