from rest_framework import status as http_status
from rest_framework.response import Response

from .results import ServiceResult


def result_response(result: ServiceResult, serializer_class=None, status=http_status.HTTP_200_OK):
    """
    Serialize a ServiceResult as ``{...value fields, "warnings": [...]}``.

    Values that are not model instances (or when no serializer is given) are
    placed under ``"result"``.
    """
    if serializer_class is not None and result.value is not None:
        data = dict(serializer_class(result.value).data)
    else:
        data = {'result': result.value}
    data['warnings'] = list(result.warnings)
    return Response(data, status=status)
