from fastapi import HTTPException


class Exception400(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class Exception401(HTTPException):
    def __init__(self, detail: str = "인증되지 않았습니다"):
        super().__init__(status_code=401, detail=detail)


class Exception403(HTTPException):
    def __init__(self, detail: str = "권한이 없습니다"):
        super().__init__(status_code=403, detail=detail)


class Exception404(HTTPException):
    def __init__(self, detail: str = "자원을 찾을 수 없습니다"):
        super().__init__(status_code=404, detail=detail)


class Exception500(HTTPException):
    def __init__(self, detail: str = "서버 오류가 발생했습니다"):
        super().__init__(status_code=500, detail=detail)
