from fastapi import APIRouter, Depends

from models.user import Role
from user.store import UserStore, get_user_store

router = APIRouter()


@router.get("/doctors")
async def get_all_doctors(store: UserStore = Depends(get_user_store)):
    doctors = await store.list_by_role(Role.DOCTOR)
    return {
        "success": True,
        "doctors": [doctor.to_response() for doctor in doctors],
    }


@router.get("/patients")
async def get_user_details(store: UserStore = Depends(get_user_store)):
    patients = await store.list_by_role(Role.PATIENT)
    return {
        "success": True,
        "user": [patient.to_response() for patient in patients],
    }
