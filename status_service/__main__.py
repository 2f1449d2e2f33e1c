from status_service.main import run

run()
