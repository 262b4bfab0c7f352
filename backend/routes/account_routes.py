import base64
import logging
from typing import Any

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.auth.passwords import hash_password, verify_password
from backend.core import config
from backend.core.user_store import create_user, find_user_by_email, find_user_by_name, update_password
from backend.core.validation import MIN_PASSWORD_LENGTH, is_valid_email, is_valid_password
from backend.database import get_db

router = APIRouter(tags=['accounts'])

logger = logging.getLogger(__name__)

PASSWORD_TOO_SHORT = f'Password must be at least {MIN_PASSWORD_LENGTH} characters'


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None
    remember: Any = None  # accepted, no session to remember


class ForgotPasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    new_password: str | None = Field(default=None, alias='newPassword')
    confirm_password: str | None = Field(default=None, alias='confirmPassword')


def error_response(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'error': message})


def server_error_response(exc: Exception) -> JSONResponse:
    content = {'error': 'Server error'}
    if config.EXPOSE_ERROR_DETAILS:
        content['details'] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def encode_profile_picture(upload: UploadFile | str | None) -> str | None:
    # A text field in place of the file counts as no picture.
    if upload is None or isinstance(upload, str):
        return None
    data = upload.file.read()
    if not data:
        return None
    return base64.b64encode(data).decode('ascii')


@router.post('/signup', status_code=status.HTTP_201_CREATED)
def signup(
    name: str | None = Form(default=None),
    email: str | None = Form(default=None),
    password: str | None = Form(default=None),
    profile_picture: UploadFile | str | None = File(default=None, alias='profilePicture'),
    db: Session = Depends(get_db),
):
    try:
        picture = encode_profile_picture(profile_picture)

        if not name or not email or not password or not picture:
            return error_response('All fields are required')

        if not is_valid_email(email):
            return error_response('Invalid email address')

        if not is_valid_password(password):
            return error_response(PASSWORD_TOO_SHORT)

        if find_user_by_name(db, name):
            return error_response('Username already registered')

        if find_user_by_email(db, email):
            return error_response('Email already registered')

        password_hash = hash_password(password)

        try:
            create_user(db, name, email, password_hash, picture)
        except IntegrityError:
            # Lost a race with a concurrent signup; the UNIQUE constraint caught it.
            if find_user_by_name(db, name):
                return error_response('Username already registered')
            return error_response('Email already registered')

        return {'message': 'Sign Up successful'}
    except Exception as exc:
        logger.exception('Signup failed')
        return server_error_response(exc)


@router.post('/login')
def login(data: LoginRequest | None = None, db: Session = Depends(get_db)):
    data = data or LoginRequest()
    try:
        if not data.username or not data.password:
            return error_response('Username and password are required')

        user = find_user_by_name(db, data.username)
        if user is None:
            return error_response('Username not found')

        if not verify_password(data.password, user.password):
            return error_response('Incorrect password')

        return {'message': 'Login successful', 'username': data.username}
    except Exception as exc:
        logger.exception('Login failed')
        return server_error_response(exc)


@router.post('/forgot-password')
def forgot_password(data: ForgotPasswordRequest | None = None, db: Session = Depends(get_db)):
    data = data or ForgotPasswordRequest()
    try:
        if not data.email or not data.new_password or not data.confirm_password:
            return error_response('All fields are required')

        if not is_valid_email(data.email):
            return error_response('Invalid email address')

        if not is_valid_password(data.new_password):
            return error_response(PASSWORD_TOO_SHORT)

        if data.new_password != data.confirm_password:
            return error_response('Passwords do not match')

        if find_user_by_email(db, data.email) is None:
            return error_response('Email not registered')

        update_password(db, data.email, hash_password(data.new_password))

        return {'message': 'Password reset successful'}
    except Exception as exc:
        logger.exception('Forgot password failed')
        return server_error_response(exc)
