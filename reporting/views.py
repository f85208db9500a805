"""
Views do app reporting.

Localização: reporting/views.py

Endpoints JSON do dashboard financeiro. As views apenas leem parâmetros,
chamam o DashboardService e serializam a resposta.

SEGURANÇA: user_id sempre vem de request.user_mongo (middleware), nunca do
cliente.
"""
import json
import logging
from functools import wraps

from bson import ObjectId
from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from core.decorators.auth import login_required_mongo
from core.exceptions import ApiError, Errors
from reporting.services.dashboard_service import DashboardService

logger = logging.getLogger(__name__)


def serialize_document(obj):
    """Converte ObjectId em string recursivamente (datas ficam para o encoder do Django)."""
    if isinstance(obj, dict):
        return {key: serialize_document(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [serialize_document(item) for item in obj]
    if isinstance(obj, ObjectId):
        return str(obj)
    return obj


def json_api(view_func):
    """
    Converte erros do service em respostas JSON.

    - ApiError: status do próprio erro
    - ValueError: 400
    - demais: 500 (logado)
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        try:
            return view_func(request, *args, **kwargs)
        except ApiError as e:
            return JsonResponse(e.to_dict(), status=e.status_code)
        except ValueError as e:
            error = ApiError(Errors.InvalidPayload, str(e))
            return JsonResponse(error.to_dict(), status=error.status_code)
        except Exception as e:
            logger.error(f"[REPORTING_API] Erro em {request.path}: {e}", exc_info=True)
            return JsonResponse({
                'error': 'INTERNAL_ERROR',
                'message': 'Erro interno do servidor'
            }, status=500)
    return wrapper


def _current_user_id(request) -> str:
    return str(request.user_mongo['_id'])


def _read_json_body(request) -> dict:
    try:
        data = json.loads(request.body or b'{}')
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e.msg}") from e
    if not isinstance(data, dict):
        raise ValueError("O corpo da requisição deve ser um objeto JSON")
    return data


@require_GET
@login_required_mongo
@json_api
def overview_api_view(request):
    """
    Totais do dashboard.

    GET /reporting/api/overview/?date=2024-03-10
    GET /reporting/api/overview/?year=2024&month=3
    """
    filter = {
        'date': request.GET.get('date'),
        'month': request.GET.get('month'),
        'year': request.GET.get('year'),
    }
    data = DashboardService().get_overview(_current_user_id(request), filter)
    return JsonResponse(serialize_document(data), safe=False)


@require_GET
@login_required_mongo
@json_api
def charts_api_view(request):
    """
    Dados dos gráficos.

    GET /reporting/api/charts/?startDate=2024-01-01&endDate=2024-06-30
    """
    filter = {
        'startDate': request.GET.get('startDate'),
        'endDate': request.GET.get('endDate'),
    }
    data = DashboardService().get_charts(_current_user_id(request), filter)
    return JsonResponse(serialize_document(data), safe=False)


@require_POST
@login_required_mongo
@json_api
def create_revenue_api_view(request):
    """
    POST /reporting/api/revenues/
    Body: {"amount": 100, "date": "2024-03-10", "source": "<user id>"}
    """
    dashboard = DashboardService().create_revenue(_current_user_id(request), _read_json_body(request))
    return JsonResponse(serialize_document(dashboard), status=201)


@require_POST
@login_required_mongo
@json_api
def create_receivable_api_view(request):
    """
    POST /reporting/api/receivables/
    Body: {"amount": 50, "date": "2024-03-10", "status": "Pending", "client": "<user id>"}
    """
    dashboard = DashboardService().create_receivable(_current_user_id(request), _read_json_body(request))
    return JsonResponse(serialize_document(dashboard), status=201)


@require_POST
@login_required_mongo
@json_api
def create_expense_api_view(request):
    """
    POST /reporting/api/expenses/
    Body: {"amount": 30, "date": "2024-03-10", "category": "Food"}
    """
    dashboard = DashboardService().create_expense(_current_user_id(request), _read_json_body(request))
    return JsonResponse(serialize_document(dashboard), status=201)
