from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .owners import get_ledger_owner
from .serializers import (
    PersonInputSerializer,
    GroupInputSerializer,
    ExpenseInputSerializer,
    FriendSerializer,
    GroupSerializer,
    ExpenseSerializer,
)
from .services import (
    list_people,
    add_person,
    list_friends,
    add_friend,
    delete_friend,
    list_groups,
    create_group,
    delete_group,
    add_expense,
    list_expenses,
    reset_expenses,
)
from .exceptions import (
    DuplicatePersonError,
    FriendNotFoundError,
    DuplicateGroupError,
    GroupNotFoundError,
    InvalidExpenseError,
)


# =============================================================================
# People
# =============================================================================

@extend_schema(
    request=PersonInputSerializer,
    description="List person names (GET) or add a person by exact name (POST).",
    tags=['people'],
)
@api_view(['GET', 'POST'])
def people(request):
    """People in the ledger - thin HTTP handler."""
    owner = get_ledger_owner(request)

    if request.method == 'GET':
        return Response(list_people(owner=owner))

    serializer = PersonInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        friend = add_person(owner=owner, name=serializer.validated_data['name'])
    except DuplicatePersonError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(
        {'message': 'Person added', 'person': friend.name},
        status=status.HTTP_201_CREATED
    )


# =============================================================================
# Friends
# =============================================================================

@extend_schema(
    request=PersonInputSerializer,
    responses={200: FriendSerializer(many=True), 201: FriendSerializer},
    description="List friends (GET) or add a friend (POST). Names are unique regardless of case.",
    tags=['people'],
)
@api_view(['GET', 'POST'])
def friends(request):
    """Friends in the ledger - thin HTTP handler."""
    owner = get_ledger_owner(request)

    if request.method == 'GET':
        serializer = FriendSerializer(list_friends(owner=owner), many=True)
        return Response(serializer.data)

    input_serializer = PersonInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    try:
        friend = add_friend(owner=owner, name=input_serializer.validated_data['name'])
    except DuplicatePersonError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(FriendSerializer(friend).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=None,
    description="Delete a friend. Expenses mentioning them are kept.",
    tags=['people'],
)
@api_view(['DELETE'])
def friend_detail(request, friend_id):
    """Delete a friend - thin HTTP handler."""
    try:
        delete_friend(owner=get_ledger_owner(request), friend_id=friend_id)
    except FriendNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response({'message': 'Friend deleted'})


# =============================================================================
# Groups
# =============================================================================

@extend_schema(
    request=GroupInputSerializer,
    responses={200: GroupSerializer(many=True), 201: GroupSerializer},
    description="List saved groups (GET) or create one (POST).",
    tags=['groups'],
)
@api_view(['GET', 'POST'])
def groups(request):
    """Saved groups - thin HTTP handler."""
    owner = get_ledger_owner(request)

    if request.method == 'GET':
        serializer = GroupSerializer(list_groups(owner=owner), many=True)
        return Response(serializer.data)

    input_serializer = GroupInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    try:
        group = create_group(
            owner=owner,
            name=input_serializer.validated_data['name'],
            members=input_serializer.validated_data['members'],
        )
    except DuplicateGroupError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(GroupSerializer(group).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=None,
    description="Delete a saved group.",
    tags=['groups'],
)
@api_view(['DELETE'])
def group_detail(request, group_id):
    """Delete a group - thin HTTP handler."""
    try:
        delete_group(owner=get_ledger_owner(request), group_id=group_id)
    except GroupNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response({'message': 'Group deleted'})


# =============================================================================
# Expenses
# =============================================================================

@extend_schema(
    request=ExpenseInputSerializer,
    responses={200: ExpenseSerializer(many=True), 201: ExpenseSerializer},
    description="List current expenses, newest first (GET) or record an expense (POST).",
    tags=['expenses'],
)
@api_view(['GET', 'POST'])
def expenses(request):
    """Current expenses - thin HTTP handler."""
    owner = get_ledger_owner(request)

    if request.method == 'GET':
        serializer = ExpenseSerializer(list_expenses(owner=owner), many=True)
        return Response(serializer.data)

    input_serializer = ExpenseInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)
    data = input_serializer.validated_data

    try:
        expense = add_expense(
            owner=owner,
            payer=data['payer'],
            amount=data['amount'],
            beneficiaries=data['beneficiaries'],
            description=data.get('description', ''),
            split_type=data.get('splitType'),
            splits=data.get('splits'),
        )
    except InvalidExpenseError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(ExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: ExpenseSerializer(many=True)},
    description="Activity feed: current expenses, newest first.",
    tags=['expenses'],
)
@api_view(['GET'])
def activity(request):
    """Activity feed - thin HTTP handler."""
    serializer = ExpenseSerializer(list_expenses(owner=get_ledger_owner(request)), many=True)
    return Response(serializer.data)


@extend_schema(
    request=None,
    description="Clear all current expenses. People and groups are kept.",
    tags=['expenses'],
)
@api_view(['POST'])
def reset(request):
    """Reset the current ledger - thin HTTP handler."""
    reset_expenses(owner=get_ledger_owner(request))
    return Response({'message': 'Data reset'})
