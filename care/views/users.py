from django.contrib.auth import logout
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.exceptions import ForbiddenError
from care.serializers.auth import ChangePasswordSerializer
from care.serializers.users import ProfileUpdateSerializer, UserSerializer
from care.services import users as user_service


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def current_user(request):
    return Response(UserSerializer(request.user).data)


@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def user_detail(request, pk: int):
    """Profile by id; only the account holder may read or change it."""
    target = user_service.get_user(pk)
    if target.id != request.user.id:
        raise ForbiddenError()
    if request.method == 'PATCH':
        s = ProfileUpdateSerializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        target = user_service.update_profile(target, s.validated_data)
    return Response(UserSerializer(target).data)


@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    s = ProfileUpdateSerializer(data=request.data, partial=True)
    s.is_valid(raise_exception=True)
    user = user_service.update_profile(request.user, s.validated_data)
    return Response(UserSerializer(user).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def change_password(request):
    s = ChangePasswordSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user_service.change_password(request.user, s.validated_data['currentPassword'], s.validated_data['newPassword'])
    return Response({'ok': True, 'message': 'Password updated'})


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_account(request):
    user = request.user
    logout(request)
    user_service.delete_user(user)
    return Response({'ok': True, 'message': 'Account deleted'})
