import os
from dotenv import load_dotenv

# .env 파일에서 환경 변수 로드
load_dotenv()

# 프론트 도메인 (CORS)
DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",        # 로컬 개발용 (Next.js)
    "http://127.0.0.1:3000",        # 로컬 개발용
    "http://localhost:5173",        # 로컬 개발용 (Vite)
]

ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",") if o.strip()
] or DEFAULT_ALLOWED_ORIGINS
