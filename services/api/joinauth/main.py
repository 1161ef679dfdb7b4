from joinauth.presentation.app import create_app

#Entrypoint for gunicorn/uvicorn: joinauth.main:app
app = create_app()
