from rest_framework import serializers
from .models import Journey


class ArchiveJourneyInputSerializer(serializers.Serializer):
    """Validate input for archiving the current ledger."""

    name = serializers.CharField(
        max_length=200,
        error_messages={
            'required': 'Journey name is required',
            'blank': 'Journey name is required',
        },
    )


class JourneySerializer(serializers.ModelSerializer):
    """Boundary shape of an archived journey."""

    totalAmount = serializers.DecimalField(
        source='total_amount',
        max_digits=14,
        decimal_places=2,
        coerce_to_string=False
    )
    expenseCount = serializers.IntegerField(source='expense_count')
    peopleCount = serializers.IntegerField(source='people_count')

    class Meta:
        model = Journey
        fields = [
            'id',
            'name',
            'date',
            'timestamp',
            'expenses',
            'settlements',
            'totalAmount',
            'expenseCount',
            'peopleCount',
        ]
        read_only_fields = fields
