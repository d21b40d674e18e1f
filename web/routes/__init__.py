"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- status: 시스템 상태
- auth: 회원가입/로그인
- transactions: 거래 생성/조회
- dashboard: 대시보드 집계
- admin: 전체 사용자/거래 (admin 역할)
"""
