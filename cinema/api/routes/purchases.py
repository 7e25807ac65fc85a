"""Purchase routes"""

from fastapi import APIRouter, Depends, status
from typing import List

from ...application.use_cases.purchase_use_cases import (
    PurchaseMovieUseCase, ListPurchasesUseCase, ListPaymentMethodsUseCase
)
from ...application.dtos.purchase_dtos import PurchaseCreateDTO, PurchaseResponseDTO, PaymentMethodDTO
from ...api.dependencies import get_current_user, get_unit_of_work, get_payment_service
from ...domain.entities.user import User
from ...domain.value_objects.entity_ids import MovieId


router = APIRouter()


@router.post("", response_model=PurchaseResponseDTO, status_code=status.HTTP_201_CREATED)
async def purchase_movie(
    purchase_data: PurchaseCreateDTO,
    current_user: User = Depends(get_current_user),
    unit_of_work = Depends(get_unit_of_work),
    payment_service = Depends(get_payment_service)
):
    """Buy a movie for the authenticated user"""
    use_case = PurchaseMovieUseCase(unit_of_work, payment_service)
    purchase = await use_case.execute(
        current_user.id,
        MovieId(purchase_data.movie_id),
        purchase_data.payment_method,
        purchase_data.payment_details()
    )
    return PurchaseResponseDTO.from_entity(purchase)


@router.get("", response_model=List[PurchaseResponseDTO])
async def list_purchases(
    current_user: User = Depends(get_current_user),
    unit_of_work = Depends(get_unit_of_work)
):
    """Purchases of the authenticated user, newest first"""
    purchases = await ListPurchasesUseCase(unit_of_work).execute(current_user.id)
    return [PurchaseResponseDTO.from_entity(p) for p in purchases]


@router.get("/payment-methods", response_model=List[PaymentMethodDTO])
async def list_payment_methods(payment_service = Depends(get_payment_service)):
    methods = await ListPaymentMethodsUseCase(payment_service).execute()
    return [PaymentMethodDTO(**method) for method in methods]
