from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.permissions import ensure_owner
from care.serializers.chat import ChatMessageSerializer, LegacyChatSerializer
from care.services import chat as svc


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def chat_history(request):
    return Response(ChatMessageSerializer(svc.list_history(request.user), many=True).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def chat_message(request):
    """Store a message; user messages also get an assistant reply stored after them."""
    s = ChatMessageSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data

    if not vd.get('is_user_message', True):
        row = svc.store_message(request.user, vd['message'], False)
        return Response(ChatMessageSerializer(row).data, status=status.HTTP_201_CREATED)

    user_msg, bot_msg = svc.exchange(request.user, vd['message'])
    return Response({
        'userMessage': ChatMessageSerializer(user_msg).data,
        'botResponse': ChatMessageSerializer(bot_msg).data,
    }, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def legacy_chat(request):
    s = LegacyChatSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user_msg, bot_msg = svc.exchange(request.user, s.validated_data['message'])
    return Response({
        'message': ChatMessageSerializer(user_msg).data,
        'reply': ChatMessageSerializer(bot_msg).data,
    }, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def chat_detail(request, pk: int):
    msg = svc.get_message(pk)
    ensure_owner(request.user, msg)
    if request.method == 'DELETE':
        svc.delete_message(msg)
        return Response(status=status.HTTP_204_NO_CONTENT)
    if request.method == 'PATCH':
        s = ChatMessageSerializer(msg, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        if 'message' in s.validated_data:
            msg = svc.update_message(msg, s.validated_data['message'])
    return Response(ChatMessageSerializer(msg).data)
