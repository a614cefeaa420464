"""
Registration, login and logout.

Successful register/login both start a Django session and return a
DRF token, so browser clients can rely on the cookie and API clients
on ``Authorization: Token <key>``.
"""
from __future__ import annotations

import logging

from django.contrib.auth import authenticate, login, logout
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from care.serializers.auth import LoginSerializer, RegisterSerializer
from care.serializers.users import UserSerializer
from care.services import users as user_service

logger = logging.getLogger(__name__)


def _session_payload(request, user) -> dict:
    login(request, user, backend='django.contrib.auth.backends.ModelBackend')
    token, _ = Token.objects.get_or_create(user=user)
    return {**UserSerializer(user).data, 'token': token.key}


@api_view(['POST'])
@permission_classes([AllowAny])
def register_view(request):
    s = RegisterSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = user_service.create_user(**s.validated_data)
    return Response(_session_payload(request, user), status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data

    user = authenticate(request, username=vd['username'], password=vd['password'])
    if not user:
        logger.warning('failed login for %s from %s', vd['username'], request.META.get('REMOTE_ADDR'))
        raise AuthenticationFailed('Invalid username or password')

    logger.info('user %s logged in', user.id)
    return Response(_session_payload(request, user))


@api_view(['POST'])
@permission_classes([AllowAny])
def logout_view(request):
    user = request.user
    if user is not None and user.is_authenticated:
        Token.objects.filter(user=user).delete()
        logger.info('user %s logged out', user.id)
    logout(request)
    return Response({'ok': True})


# ScopedRateThrottle reads throttle_scope from the generated view class
register_view.cls.throttle_scope = 'register'
login_view.cls.throttle_scope = 'login'
