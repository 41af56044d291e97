from fastapi import Request

from services.visa_directory import VisaDirectory


def get_directory(request: Request) -> VisaDirectory:
    return request.app.state.directory
