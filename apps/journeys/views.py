from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.ledger.owners import get_ledger_owner

from .serializers import ArchiveJourneyInputSerializer, JourneySerializer
from .services import archive_current_ledger, list_journeys, get_journey
from .exceptions import InvalidJourneyNameError, JourneyNotFoundError


@extend_schema(
    responses={200: JourneySerializer(many=True)},
    description="List archived journeys, newest first.",
    tags=['journeys'],
)
@api_view(['GET'])
def journey_list(request):
    """Archived journeys - thin HTTP handler."""
    serializer = JourneySerializer(list_journeys(owner=get_ledger_owner(request)), many=True)
    return Response(serializer.data)


@extend_schema(
    responses={200: JourneySerializer},
    description="Get one archived journey.",
    tags=['journeys'],
)
@api_view(['GET'])
def journey_detail(request, journey_id):
    """Single journey - thin HTTP handler."""
    try:
        journey = get_journey(owner=get_ledger_owner(request), journey_id=journey_id)
    except JourneyNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(JourneySerializer(journey).data)


@extend_schema(
    request=ArchiveJourneyInputSerializer,
    responses={201: JourneySerializer},
    description=(
        "Archive the current ledger as a journey. Stores the expenses and "
        "their settlement, then clears the current expenses. People and "
        "groups are kept."
    ),
    tags=['journeys'],
)
@api_view(['POST'])
def archive(request):
    """Archive current ledger - thin HTTP handler."""
    input_serializer = ArchiveJourneyInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    try:
        journey = archive_current_ledger(
            owner=get_ledger_owner(request),
            name=input_serializer.validated_data['name'],
        )
    except InvalidJourneyNameError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(JourneySerializer(journey).data, status=status.HTTP_201_CREATED)
