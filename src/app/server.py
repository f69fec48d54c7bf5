from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api import health, weather
from config import ALLOWED_ORIGINS


def create_app() -> FastAPI:
    app = FastAPI(title="Cosmic Weather API")

    # ============================================================
    # 🌐 CORS 설정 (프론트 도메인 허용)
    # ============================================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # ============================================================
    # 📦 라우터 등록
    # ============================================================
    app.include_router(weather.router, prefix="/api")
    app.include_router(health.router)

    return app


# ✅ 앱 인스턴스 생성
app = create_app()
