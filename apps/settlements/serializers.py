from rest_framework import serializers


class SettlementTransactionSerializer(serializers.Serializer):
    """One payment of a settlement: ``from`` pays ``amount`` to ``to``."""

    amount = serializers.DecimalField(max_digits=14, decimal_places=2, coerce_to_string=False)

    def get_fields(self):
        # 'from' is a reserved word and cannot be declared as an attribute
        fields = super().get_fields()
        return {
            'from': serializers.CharField(source='from_person'),
            'to': serializers.CharField(source='to_person'),
            **fields,
        }


class BalanceSerializer(serializers.Serializer):
    """Net balance of one person, rounded to cents."""

    person = serializers.CharField()
    balance = serializers.DecimalField(max_digits=14, decimal_places=2, coerce_to_string=False)
