"""exceptions: 저장소 계층 예외 모듈.

데이터 계층에서 발생하는 예외를 드라이버 에러 코드 대신 타입으로 구분합니다.
"""


class RecordNotFoundError(LookupError):
    """대상 레코드가 존재하지 않을 때 발생하는 예외.

    Attributes:
        resource: 리소스 이름 (예: 'category').
        record_id: 조회한 레코드 ID.
    """

    def __init__(self, resource: str, record_id: int):
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} {record_id} not found")
