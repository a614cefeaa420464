from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.serializers.chat import FirstAidSerializer, SymptomSerializer
from care.services import assistant


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def symptom_checker(request):
    s = SymptomSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    analysis = assistant.analyze_symptoms(vd['symptoms'], vd['age'], vd['gender'], vd.get('medicalHistory'))
    return Response({'analysis': analysis})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def first_aid_guidance(request):
    s = FirstAidSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    return Response({'guidance': assistant.first_aid_guidance(s.validated_data['situation'])})
