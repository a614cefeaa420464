"""
Chat history and the assistant exchange.
"""
from __future__ import annotations

import bleach

from care.exceptions import ValidationError
from care.models import ChatMessage
from care.services import assistant
from care.services.store import apply_updates, get_or_404, translate_integrity_errors


def _clean(message: str) -> str:
    text = bleach.clean((message or '').strip(), strip=True)
    if not text:
        raise ValidationError({'message': ['Message cannot be empty']})
    return text


def list_history(user):
    return ChatMessage.objects.filter(user=user).order_by('timestamp', 'id')


def get_message(pk) -> ChatMessage:
    return get_or_404(ChatMessage, pk, 'Message')


def store_message(user, message: str, is_user_message: bool) -> ChatMessage:
    with translate_integrity_errors():
        return ChatMessage.objects.create(user=user, message=_clean(message), is_user_message=is_user_message)


def exchange(user, message: str) -> tuple[ChatMessage, ChatMessage]:
    """Persist the user's message, obtain a reply and persist it.

    The user row is written before the assistant is called, so its
    id and timestamp always precede the reply's.
    """
    user_msg = store_message(user, message, True)
    reply = assistant.chat_reply(user_msg.message)
    bot_msg = ChatMessage.objects.create(user=user, message=reply, is_user_message=False)
    return user_msg, bot_msg


def update_message(msg: ChatMessage, message: str) -> ChatMessage:
    return apply_updates(msg, {'message': _clean(message)}, ('message',))


def delete_message(msg: ChatMessage) -> None:
    msg.delete()
