from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.templating import Jinja2Templates

from calculator.models import LotSizeRequest, LotSizeResponse
from calculator.service import calculate_lot_size, is_gold_or_jpy
from utils.logger import get_logger

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
FORM_TEMPLATE = "calculateLotSize.html"
FORM_FIELDS = (
    "entryPrice",
    "stopLossPrice",
    "accountBalance",
    "riskPercentageUWantToRisk",
    "goldOrJPYPair",
)

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
logger = get_logger(__name__)

router = APIRouter(tags=["Calculator"])


def _render(request: Request, form: dict, result=None, error=None, status_code=200):
    return templates.TemplateResponse(
        request,
        FORM_TEMPLATE,
        {
            "form": form,
            "gold_or_jpy": is_gold_or_jpy(form.get("goldOrJPYPair")),
            "result": result,
            "error": error,
        },
        status_code=status_code,
    )


@router.get("/calculateLotSize")
def get_calculate_lot_size(request: Request):
    return _render(request, form={})


async def _read_submission(request: Request):
    # the form posts urlencoded, API clients may post JSON to the same path
    if request.headers.get("content-type", "").startswith("application/json"):
        body = await request.json()
        if not isinstance(body, dict):
            raise ValueError("JSON body must be an object")
    else:
        body = await request.form()

    return {name: body.get(name) for name in FORM_FIELDS}


@router.post("/calculateLotSize")
async def post_calculate_lot_size(request: Request):
    form = {}

    try:
        form = await _read_submission(request)
        result = calculate_lot_size(
            entry_price=form["entryPrice"],
            stop_loss_price=form["stopLossPrice"],
            account_balance=form["accountBalance"],
            risk_percentage=form["riskPercentageUWantToRisk"],
            gold_or_jpy_pair=form["goldOrJPYPair"],
        )
    except ValueError as e:
        logger.warning(f"Rejected form input: {e}")
        return _render(request, form=form, error=str(e), status_code=400)

    logger.info(f"Lot size {result['recommendedLotSize']} for {result['pipsIfLoose']} pips")
    return _render(request, form=form, result=result)


@router.post("/api/lot-size", response_model=LotSizeResponse)
def lot_size_api(data: LotSizeRequest):
    try:
        result = calculate_lot_size(
            entry_price=data.entry_price,
            stop_loss_price=data.stop_loss_price,
            account_balance=data.account_balance,
            risk_percentage=data.risk_percentage,
            gold_or_jpy_pair=data.gold_or_jpy_pair,
        )
    except ValueError as e:
        logger.warning(f"Rejected API input: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Lot size {result['recommendedLotSize']} for {result['pipsIfLoose']} pips")
    return result
