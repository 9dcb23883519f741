from django.db import models


class Counter(models.Model):
    """Named integer sequence used to mint human-readable identifiers."""

    key = models.CharField(max_length=100, unique=True, db_index=True)
    seq = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'counters'
        ordering = ['key']

    def __str__(self):
        return f"{self.key}={self.seq}"

    @property
    def counter_type(self):
        """Namespace before the first colon, e.g. 'stock' for 'stock:AU-SUV'."""
        return self.key.split(':')[0]
