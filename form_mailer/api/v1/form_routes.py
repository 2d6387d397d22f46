"""Routes receiving the career and contact forms."""

from typing import Any, Dict, Optional, Union

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool

from form_mailer.api.dependencies import (
    get_app_settings,
    get_career_handler,
    get_contact_handler,
    read_submitted_fields,
)
from form_mailer.core.config import Settings
from form_mailer.schemas import ErrorResponse, SubmissionResponse
from form_mailer.services import (
    CareerSubmissionHandler,
    ContactSubmissionHandler,
    read_resume,
)

router = APIRouter(tags=["forms"])

ERROR_RESPONSES: Dict[Union[int, str], Dict[str, Any]] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "/career",
    response_model=SubmissionResponse,
    responses={**ERROR_RESPONSES, 413: {"model": ErrorResponse}, 415: {"model": ErrorResponse}},
)
async def submit_career(
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    mobile: Optional[str] = Form(None),
    job_title: Optional[str] = Form(None),
    experience: Optional[str] = Form(None),
    current_ctc: Optional[str] = Form(None),
    expected_ctc: Optional[str] = Form(None),
    skills: Optional[str] = Form(None),
    resume: Optional[UploadFile] = File(None),
    handler: CareerSubmissionHandler = Depends(get_career_handler),
    config: Settings = Depends(get_app_settings),
) -> SubmissionResponse:
    """Email a job application, with its resume attached, to the HR inbox."""

    attachment = None
    if resume is not None:
        attachment = await read_resume(resume, config.MAX_FILE_SIZE_BYTES)

    fields = {
        "name": name,
        "email": email,
        "mobile": mobile,
        "job_title": job_title,
        "experience": experience,
        "current_ctc": current_ctc,
        "expected_ctc": expected_ctc,
        "skills": skills,
    }
    return await run_in_threadpool(handler.handle, fields, attachment)


@router.post("/contact", response_model=SubmissionResponse, responses=ERROR_RESPONSES)
async def submit_contact(
    fields: Dict[str, Any] = Depends(read_submitted_fields),
    handler: ContactSubmissionHandler = Depends(get_contact_handler),
) -> SubmissionResponse:
    """Email a website inquiry to the HR inbox, replying to the sender."""

    return await run_in_threadpool(handler.handle, fields)


__all__ = ["router"]
