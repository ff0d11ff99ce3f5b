"""AuditLog DRF serializer (camelCase wire format, read-only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.audit.models import AuditLog


class AuditLogSerializer(serializers.ModelSerializer):
    tableName = serializers.CharField(source="table_name", read_only=True)
    recordId = serializers.IntegerField(source="record_id", read_only=True)
    oldValues = serializers.CharField(source="old_values", read_only=True, allow_null=True)
    newValues = serializers.CharField(source="new_values", read_only=True, allow_null=True)
    changedBy = serializers.CharField(source="changed_by", read_only=True, allow_null=True)
    changedAt = serializers.DateTimeField(source="changed_at", read_only=True)

    class Meta:
        model = AuditLog
        fields = [
            "id",
            "tableName",
            "action",
            "recordId",
            "oldValues",
            "newValues",
            "changedBy",
            "changedAt",
        ]
        read_only_fields = fields
