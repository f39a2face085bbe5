from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.schemas import (
    CancelResponseSchema,
    ReservationCreateSchema,
    ReservationSchema,
    ReservationUpdateSchema,
)
from app.application.exceptions import ReservationNotFoundError, ReservationValidationError
from app.application.use_cases.reservations import ManageReservationsUseCase
from app.wiring.dependencies import get_reservations_use_case

router = APIRouter()


@router.post("", response_model=ReservationSchema, status_code=201)
def create_reservation(
    req: ReservationCreateSchema,
    uc: ManageReservationsUseCase = Depends(get_reservations_use_case),
):
    try:
        reservation = uc.create(name=req.name, date_value=req.date, time_value=req.time, guests=req.guests)
    except ReservationValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ReservationSchema.from_entity(reservation)


@router.get("", response_model=list[ReservationSchema])
def list_reservations(uc: ManageReservationsUseCase = Depends(get_reservations_use_case)):
    return [ReservationSchema.from_entity(r) for r in uc.list()]


@router.get("/{reservation_id}", response_model=ReservationSchema)
def get_reservation(
    reservation_id: str,
    uc: ManageReservationsUseCase = Depends(get_reservations_use_case),
):
    try:
        reservation = uc.get(reservation_id)
    except ReservationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ReservationSchema.from_entity(reservation)


@router.put("/{reservation_id}", response_model=ReservationSchema)
def update_reservation(
    reservation_id: str,
    req: ReservationUpdateSchema,
    uc: ManageReservationsUseCase = Depends(get_reservations_use_case),
):
    try:
        reservation = uc.update(reservation_id, req.model_dump(exclude_unset=True))
    except ReservationValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ReservationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ReservationSchema.from_entity(reservation)


@router.delete("/{reservation_id}", response_model=CancelResponseSchema)
def cancel_reservation(
    reservation_id: str,
    uc: ManageReservationsUseCase = Depends(get_reservations_use_case),
):
    try:
        reservation = uc.cancel(reservation_id)
    except ReservationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return CancelResponseSchema(message="Reservation cancelled", reservation=ReservationSchema.from_entity(reservation))
