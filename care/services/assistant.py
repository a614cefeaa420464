"""
First-aid assistant collaborator.

Replies come from the configured chatbot HTTP API.  When that API is
not configured or fails, ``fallback_reply`` answers from a fixed
keyword table so the chat keeps working offline.
"""
from __future__ import annotations

import logging

import requests
from django.conf import settings

from care.exceptions import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_REPLY = (
    "I'm sorry, I don't understand that query. Could you please rephrase it "
    "or ask about a specific first aid situation?"
)

# (keywords, reply); first match wins
KEYWORD_REPLIES: list[tuple[tuple[str, ...], str]] = [
    (("burn",),
     "For a minor burn:\n"
     "1. Cool the burn with cool (not cold) running water for 10-15 minutes\n"
     "2. Remove rings or other tight items\n"
     "3. Apply lotion with aloe vera\n"
     "4. Bandage the burn loosely with a sterile gauze\n"
     "5. Take an over-the-counter pain reliever if needed\n\n"
     "If the burn is severe or larger than 3 inches, seek medical attention immediately."),
    (("cut", "bleeding"),
     "To control bleeding:\n"
     "1. Apply direct pressure with a clean cloth or bandage\n"
     "2. Keep the injured area elevated above the heart if possible\n"
     "3. Clean the wound with soap and water once bleeding slows\n"
     "4. Apply antibiotic ointment and cover with a sterile bandage\n\n"
     "Seek medical attention if bleeding doesn't stop after 15 minutes of pressure "
     "or the wound is deep/large."),
    (("cpr", "cardiac"),
     "For CPR (adult):\n"
     "1. Call emergency services (911)\n"
     "2. Place the person on their back on a firm surface\n"
     "3. Place your hands, one on top of the other, on the center of the chest\n"
     "4. Push hard and fast, about 100-120 compressions per minute\n"
     "5. Let the chest rise completely between compressions\n\n"
     "Consider rescue breaths if trained, but compression-only CPR can be effective too."),
    (("chok",),
     "For a choking adult:\n"
     "1. Ask 'Are you choking?' If they nod yes and cannot speak, act immediately\n"
     "2. Stand behind the person and wrap your arms around their waist\n"
     "3. Make a fist with one hand and place it slightly above their navel\n"
     "4. Grasp your fist with your other hand and press inward and upward with quick thrusts\n"
     "5. Repeat until the object is expelled\n\n"
     "If the person becomes unconscious, begin CPR."),
    (("heart attack", "chest pain"),
     "Possible heart attack symptoms include chest pain/pressure, pain in arms/back/neck/jaw, "
     "shortness of breath, cold sweat, nausea.\n\n"
     "Actions to take:\n"
     "1. Call emergency services (911) immediately\n"
     "2. Have the person sit down and rest\n"
     "3. Loosen tight clothing\n"
     "4. If the person takes heart medication like nitroglycerin, help them take it\n"
     "5. If advised by emergency services and the person is not allergic, they might chew an aspirin\n\n"
     "If the person becomes unconscious, begin CPR if trained."),
    (("stroke",),
     "Remember the acronym FAST for stroke symptoms:\n"
     "F - Face drooping\nA - Arm weakness\nS - Speech difficulty\n"
     "T - Time to call emergency services\n\n"
     "Also watch for sudden numbness, confusion, trouble seeing, dizziness, or severe headache.\n\n"
     "Call 911 immediately if you suspect a stroke. Note the time symptoms started."),
    (("hello", "hi", "hey"),
     "Hello! I'm your virtual first aid assistant. How can I help you today?"),
    (("thank",),
     "You're welcome! If you have any other first aid questions, feel free to ask."),
]


def fallback_reply(message: str) -> str:
    text = (message or '').lower()
    for keywords, reply in KEYWORD_REPLIES:
        if any(k in text for k in keywords):
            return reply
    return DEFAULT_REPLY


def ask_assistant(prompt: str) -> str:
    """POST ``prompt`` to the chatbot API and return its reply text.

    Raises :class:`UpstreamError` when no API key is configured, the
    request fails, or the response carries no reply.
    """
    api_key = settings.CHATBOT_API_KEY
    if not api_key:
        raise UpstreamError('Assistant is not configured')
    try:
        resp = requests.post(
            settings.CHATBOT_API_URL,
            json={'message': prompt},
            headers={'Authorization': f'Bearer {api_key}'},
            timeout=settings.CHATBOT_TIMEOUT,
        )
        data = resp.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning('assistant request failed: %s', exc)
        raise UpstreamError('Assistant request failed') from exc
    if not resp.ok:
        message = data.get('message') if isinstance(data, dict) else None
        logger.warning('assistant returned %s: %s', resp.status_code, message)
        raise UpstreamError(message or 'Assistant error')
    reply = data.get('reply') if isinstance(data, dict) else None
    if not reply:
        raise UpstreamError('Assistant returned no reply')
    return str(reply)


def chat_reply(message: str) -> str:
    """Reply for the chat endpoint, using the keyword table when the API is unavailable."""
    try:
        return ask_assistant(message)
    except UpstreamError:
        return fallback_reply(message)


def analyze_symptoms(symptoms: str, age: int, gender: str, medical_history: str | None = None) -> str:
    prompt = (
        f"Analyze symptoms: {symptoms}, Age: {age}, Gender: {gender}, "
        f"Medical History: {medical_history or 'none'}"
    )
    return ask_assistant(prompt)


def first_aid_guidance(situation: str) -> str:
    return ask_assistant(f"Provide first aid guidance for: {situation}")
