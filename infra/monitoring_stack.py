"""Monitoring CDK stack: SNS alert topic and CloudWatch alarms.

Consumes the function and table built by earlier stacks; it only adds
observability bindings and never creates data or compute resources.
"""

from __future__ import annotations

from aws_cdk import CfnOutput, Duration, Stack
from aws_cdk import aws_cloudwatch as cloudwatch
from aws_cdk import aws_cloudwatch_actions as cloudwatch_actions
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_sns as sns
from aws_cdk import aws_sns_subscriptions as subscriptions
from constructs import Construct

from infra.config import resolve_stage

ALARM_PERIOD = Duration.minutes(5)

LAMBDA_ERROR_THRESHOLD = 5
LAMBDA_ERROR_EVALUATION_PERIODS = 2

LAMBDA_DURATION_THRESHOLD_MS = 10_000
LAMBDA_DURATION_EVALUATION_PERIODS = 3

DYNAMO_THROTTLE_THRESHOLD = 1
DYNAMO_THROTTLE_EVALUATION_PERIODS = 1


class MonitoringStack(Stack):
    """Alarms on the items function and table, routed to :attr:`alert_topic`."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        function: _lambda.IFunction,
        table: dynamodb.ITable,
        alert_email: str | None = None,
        stage: str | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.stage = stage or resolve_stage(self.node)

        # --- SNS Topic ---
        self.alert_topic = self._create_alert_topic(alert_email)

        # --- Alarms ---
        self.alarms = [
            self._create_lambda_error_alarm(function),
            self._create_lambda_duration_alarm(function),
            self._create_dynamo_throttle_alarm(table),
        ]
        action = cloudwatch_actions.SnsAction(self.alert_topic)
        for alarm in self.alarms:
            alarm.add_alarm_action(action)

        self._create_outputs()

    def _create_alert_topic(self, alert_email: str | None) -> sns.Topic:
        topic = sns.Topic(
            self,
            "AlertTopic",
            topic_name=f"{self.stage}-app-alerts",
            display_name=f"Alerts for {self.stage} environment",
        )
        if alert_email:
            topic.add_subscription(subscriptions.EmailSubscription(alert_email))
        return topic

    def _create_lambda_error_alarm(self, function: _lambda.IFunction) -> cloudwatch.Alarm:
        return cloudwatch.Alarm(
            self,
            "LambdaErrorAlarm",
            alarm_name=f"{self.stage}-lambda-errors",
            alarm_description="Lambda function error rate is too high",
            metric=function.metric_errors(period=ALARM_PERIOD),
            threshold=LAMBDA_ERROR_THRESHOLD,
            evaluation_periods=LAMBDA_ERROR_EVALUATION_PERIODS,
        )

    def _create_lambda_duration_alarm(self, function: _lambda.IFunction) -> cloudwatch.Alarm:
        return cloudwatch.Alarm(
            self,
            "LambdaDurationAlarm",
            alarm_name=f"{self.stage}-lambda-duration",
            alarm_description="Lambda function duration is too high",
            metric=function.metric_duration(period=ALARM_PERIOD),
            threshold=LAMBDA_DURATION_THRESHOLD_MS,
            evaluation_periods=LAMBDA_DURATION_EVALUATION_PERIODS,
        )

    def _create_dynamo_throttle_alarm(self, table: dynamodb.ITable) -> cloudwatch.Alarm:
        return cloudwatch.Alarm(
            self,
            "DynamoThrottleAlarm",
            alarm_name=f"{self.stage}-dynamo-throttles",
            alarm_description="DynamoDB is being throttled",
            metric=cloudwatch.Metric(
                namespace="AWS/DynamoDB",
                metric_name="ThrottledRequests",
                dimensions_map={"TableName": table.table_name},
                period=ALARM_PERIOD,
            ),
            threshold=DYNAMO_THROTTLE_THRESHOLD,
            evaluation_periods=DYNAMO_THROTTLE_EVALUATION_PERIODS,
        )

    def _create_outputs(self) -> None:
        CfnOutput(
            self,
            "AlertTopicArn",
            value=self.alert_topic.topic_arn,
            description=f"SNS topic ARN for alarms in {self.stage} environment",
        )
