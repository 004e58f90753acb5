# app/adapters/api/routers/inflection.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
import structlog

from app.adapters.api.dependencies import get_inflect_word_use_case, verify_api_key
from app.core.domain.exceptions import DomainError, InvalidRequestError
from app.core.domain.models import (
    BulkParadigmRequest,
    DerivationRequest,
    ParadigmRequest,
    ParadigmTable,
    RuleApplicationRequest,
    TypologyEstimateRequest,
    TypologyInflectionRequest,
)
from app.core.use_cases.inflect_word import InflectWord
from morphology.models import DerivedWord, InflectionResult, ParadigmCell, TypologyEstimation

logger = structlog.get_logger()

# Endpoints are sync: the engine is CPU-bound and FastAPI runs them in its
# threadpool.
router = APIRouter(
    tags=["Inflection"],
    dependencies=[Depends(verify_api_key)],
)


@router.post(
    "/inflect/rule",
    response_model=InflectionResult,
    summary="Apply one inflection rule to a word",
)
def apply_rule(
    payload: RuleApplicationRequest,
    use_case: InflectWord = Depends(get_inflect_word_use_case),
) -> InflectionResult:
    return use_case.apply_rule(payload.word, payload.rule, payload.phonology)


@router.post(
    "/inflect",
    response_model=InflectionResult,
    summary="Generate a word form under the grammar's typology",
)
def inflect(
    payload: TypologyInflectionRequest,
    use_case: InflectWord = Depends(get_inflect_word_use_case),
) -> InflectionResult:
    """
    `applied=false` with a trace is a normal answer (e.g. isolating
    languages with no marking for the requested combination), not an error.
    """
    return use_case.inflect(
        payload.word,
        payload.entry_id,
        payload.pos_id,
        payload.dimension_values,
        payload.grammar,
        payload.phonology,
    )


@router.post(
    "/paradigm",
    response_model=List[ParadigmCell],
    summary="Full paradigm table for one root",
)
def paradigm(
    payload: ParadigmRequest,
    use_case: InflectWord = Depends(get_inflect_word_use_case),
) -> List[ParadigmCell]:
    return use_case.paradigm(payload.word, payload.pos_id, payload.rules, payload.phonology)


@router.post(
    "/paradigm/bulk",
    response_model=List[ParadigmTable],
    summary="Paradigm tables for many roots",
)
def bulk_paradigm(
    payload: BulkParadigmRequest,
    use_case: InflectWord = Depends(get_inflect_word_use_case),
) -> List[ParadigmTable]:
    try:
        tables = use_case.bulk_paradigms(payload.words, payload.pos_id, payload.rules, payload.phonology)
    except InvalidRequestError as e:
        logger.warning("bulk_paradigm_rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
    return [ParadigmTable(word=word, cells=cells) for word, cells in tables.items()]


@router.post(
    "/derive",
    response_model=List[DerivedWord],
    summary="Preview a derivation rule over source words",
)
def derive(
    payload: DerivationRequest,
    use_case: InflectWord = Depends(get_inflect_word_use_case),
) -> List[DerivedWord]:
    try:
        return use_case.derive(payload.words, payload.rule, payload.phonology)
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
    except DomainError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/typology/estimate",
    response_model=TypologyEstimation,
    summary="Estimate synthesis and fusion indices",
)
def estimate_typology(
    payload: TypologyEstimateRequest,
    use_case: InflectWord = Depends(get_inflect_word_use_case),
) -> TypologyEstimation:
    return use_case.estimate_typology(payload.lexicon, payload.grammar)
