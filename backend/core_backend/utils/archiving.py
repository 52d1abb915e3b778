"""
Soft delete infrastructure.

Rows are never physically removed: they are flagged with ``is_deleted`` and
hidden from the default manager, while ``all_objects`` keeps them reachable
for audit.
"""

from django.db import models
from django.utils import timezone


class SoftDeleteQuerySet(models.QuerySet):
    """
    Custom QuerySet that provides soft delete functionality.
    """

    def alive(self):
        """Return only records that have not been soft-deleted."""
        return self.filter(is_deleted=False)

    def deleted(self):
        """Return only soft-deleted records."""
        return self.filter(is_deleted=True)

    def soft_delete(self):
        """
        Flag every record in this queryset as deleted.

        Returns the number of rows updated.
        """
        return self.update(is_deleted=True, deleted_at=timezone.now())


class SoftDeleteManager(models.Manager):
    """
    Custom manager that filters out soft-deleted records by default.
    """

    def get_queryset(self):
        return SoftDeleteQuerySet(self.model, using=self._db).alive()

    def with_deleted(self):
        """Return all records including soft-deleted ones."""
        return SoftDeleteQuerySet(self.model, using=self._db)


class SoftDeleteMixin(models.Model):
    """
    Abstract base class that provides soft delete functionality.

    Models inheriting from this mixin get:
    - is_deleted flag and deleted_at timestamp
    - soft_delete() method
    - ``objects`` manager that hides deleted rows, ``all_objects`` that does not
    """

    is_deleted = models.BooleanField(
        default=False,
        db_index=True,
        help_text="Designates whether this record has been soft-deleted.",
    )
    deleted_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Timestamp when this record was soft-deleted.",
    )

    objects = SoftDeleteManager()
    all_objects = SoftDeleteQuerySet.as_manager()

    class Meta:
        abstract = True

    def soft_delete(self):
        """Flag this record as deleted."""
        self.is_deleted = True
        self.deleted_at = timezone.now()
        self.save(update_fields=["is_deleted", "deleted_at"])

    def delete(self, using=None, keep_parents=False):
        """
        Override delete to perform soft delete instead.

        To perform a hard delete, use force_delete().
        """
        self.soft_delete()

    def force_delete(self, using=None, keep_parents=False):
        """Permanently remove the record."""
        return super().delete(using=using, keep_parents=keep_parents)
