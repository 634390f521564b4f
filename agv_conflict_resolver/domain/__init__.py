"""충돌 엔진 도메인 레이어.

기하 연산, AGV 엔티티, 충돌 검출/해소 도메인 서비스를 정의한다.
외부 레이어에 대한 의존성은 없다.
"""
