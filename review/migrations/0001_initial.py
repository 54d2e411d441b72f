import django.utils.timezone
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ReviewItem",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("owner_id", models.UUIDField()),
                ("course_id", models.UUIDField(blank=True, null=True)),
                (
                    "source_type",
                    models.CharField(
                        choices=[("wrong_note", "오답노트"), ("flashcard", "암기카드")],
                        max_length=16,
                    ),
                ),
                ("source_id", models.UUIDField()),
                ("box", models.PositiveSmallIntegerField(default=1)),
                ("next_review_at", models.DateField()),
                ("last_reviewed_at", models.DateTimeField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("suspended", "Suspended")],
                        default="active",
                        max_length=16,
                    ),
                ),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "review_item",
                "indexes": [
                    models.Index(fields=["owner_id", "status", "next_review_at"], name="review_item_owner_due_idx"),
                    models.Index(fields=["owner_id", "course_id"], name="review_item_owner_course_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(("status", "active")),
                        fields=("owner_id", "source_type", "source_id"),
                        name="uniq_active_review_item_per_source",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("box__gte", 1), ("box__lte", 5)),
                        name="review_item_box_range",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ReviewSessionRecord",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("owner_id", models.UUIDField()),
                ("total", models.PositiveIntegerField()),
                ("know_count", models.PositiveIntegerField(default=0)),
                ("confused_count", models.PositiveIntegerField(default=0)),
                ("forgot_count", models.PositiveIntegerField(default=0)),
                ("again_count", models.PositiveIntegerField(default=0)),
                ("unsure_count", models.PositiveIntegerField(default=0)),
                ("rollover_count", models.PositiveIntegerField(default=0)),
                ("completed_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "review_session_record",
                "indexes": [
                    models.Index(fields=["owner_id", "completed_at"], name="review_session_owner_idx"),
                ],
            },
        ),
    ]
