from decimal import Decimal
from rest_framework import serializers
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema_field
from .models import Friend, Group, Expense, SplitType


# =============================================================================
# Input Serializers
# =============================================================================

class PersonInputSerializer(serializers.Serializer):
    """Validate input for adding a person or friend."""

    name = serializers.CharField(max_length=200)


class GroupInputSerializer(serializers.Serializer):
    """
    Validate input for creating a group.

    Fields:
        name (str): Group name
        members (list[str]): At least one person name
    """

    name = serializers.CharField(max_length=200)
    members = serializers.ListField(
        child=serializers.CharField(max_length=200),
        allow_empty=False,
        error_messages={'empty': 'At least one member is required'},
    )


class ExpenseInputSerializer(serializers.Serializer):
    """
    Validate input for recording an expense.

    Field names follow the client's camelCase payload. Split sums are
    checked by the service layer.
    """

    payer = serializers.CharField(max_length=200)
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    description = serializers.CharField(required=False, allow_blank=True, default='')
    beneficiaries = serializers.ListField(
        child=serializers.CharField(max_length=200),
        allow_empty=False
    )
    splitType = serializers.ChoiceField(
        choices=SplitType.choices,
        required=False,
        default=SplitType.EQUAL
    )
    splits = serializers.DictField(
        child=serializers.DecimalField(max_digits=12, decimal_places=2),
        required=False,
        allow_null=True
    )


# =============================================================================
# Output Serializers
# =============================================================================

class FriendSerializer(serializers.ModelSerializer):
    """Serializer for friends."""

    class Meta:
        model = Friend
        fields = ['id', 'name']
        read_only_fields = fields


class GroupSerializer(serializers.ModelSerializer):
    """Serializer for saved groups."""

    class Meta:
        model = Group
        fields = ['id', 'name', 'members']
        read_only_fields = fields


class ExpenseSerializer(serializers.ModelSerializer):
    """Boundary shape of an expense; amounts are rendered as numbers."""

    amount = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False)
    splitType = serializers.CharField(source='split_type')
    splits = serializers.SerializerMethodField()

    class Meta:
        model = Expense
        fields = [
            'id',
            'payer',
            'amount',
            'description',
            'beneficiaries',
            'splitType',
            'splits',
            'date',
            'timestamp',
        ]
        read_only_fields = fields

    @extend_schema_field(OpenApiTypes.OBJECT)
    def get_splits(self, obj):
        if obj.splits is None:
            return None
        return {person: float(Decimal(value)) for person, value in obj.splits.items()}
