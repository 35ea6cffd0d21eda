from .cli import deploy

deploy()
