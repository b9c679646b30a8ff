"""utils: 유틸리티 함수들을 모아놓은 패키지.

Modules:
    formatters: 날짜/시간 포맷팅
    exceptions: 저장소 계층 예외
"""
