from acctmgr.cli import app

app()
