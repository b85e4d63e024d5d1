from strings_audit.main import run

run()
