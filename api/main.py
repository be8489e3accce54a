import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import agent, entrypoints
from config.logger import configure_logging
from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
	settings = settings or get_settings()

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
		logger.info(f'Starting {settings.APP_NAME}...')

		init_dependencies(settings)
		logger.info(
			f'Agent ready at http://{settings.HOST}:{settings.PORT}/.well-known/agent.json'
		)

		yield

		logger.info('Shutting down...')
		await cleanup_dependencies()

	app = FastAPI(
		title=settings.APP_NAME,
		version=settings.AGENT_VERSION,
		debug=settings.DEBUG,
		lifespan=lifespan,
	)
	app.state.settings = settings

	app.include_router(agent.router)
	app.include_router(entrypoints.rates_router)
	if settings.SUMMARY_ENABLED:
		app.include_router(entrypoints.summary_router)
	register_exception_handlers(app)

	return app


app = create_app()


def run() -> None:
	import uvicorn

	settings = get_settings()
	uvicorn.run(
		'api.main:app',
		host=settings.HOST,
		port=settings.PORT,
		reload=settings.DEBUG,
		log_level=settings.LOG_LEVEL.lower(),
	)


if __name__ == '__main__':
	run()
