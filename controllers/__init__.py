"""controllers: 요청 핸들러 패키지.

카테고리 관련 컨트롤러 모듈을 제공합니다.
"""

from . import category_controller

__all__ = [
    "category_controller",
]
