#!/usr/bin/env python3
"""CDK application entry point for the stage-parameterized items service."""

import logging

import aws_cdk as cdk

from infra.composition import apply_standard_tags, compose, read_environment_config

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

app = cdk.App()

config = read_environment_config(app)

compose(app, config)
apply_standard_tags(app, config)

app.synth()
