from django.core.serializers.json import DjangoJSONEncoder
from django.db import models


class IdempotencyKey(models.Model):
    """
    Stored response for a client-supplied Idempotency-Key.

    A key is unique within its scope (the endpoint it was sent to); the
    first successful response is replayed for retries until expires_at.
    """

    scope = models.CharField(max_length=100)
    key = models.CharField(max_length=255)

    status_code = models.PositiveSmallIntegerField()
    response_body = models.JSONField(encoder=DjangoJSONEncoder)

    created_at = models.DateTimeField(auto_now_add=True)
    expires_at = models.DateTimeField()

    class Meta:
        db_table = 'idempotency_keys'
        constraints = [
            models.UniqueConstraint(fields=['scope', 'key'], name='unique_idempotency_scope_key'),
        ]
        indexes = [
            models.Index(fields=['expires_at'], name='idempotency_expires_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.scope}:{self.key} ({self.status_code})"
