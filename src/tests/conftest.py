import boto3
import pytest
from moto import mock_aws

from doubles import REGION, TABLE_NAME


@pytest.fixture
def aws_env(monkeypatch):
    # Fake credentials so nothing can reach a real account
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    monkeypatch.setenv("TABLE_NAME", TABLE_NAME)
    for name in ("COUNTER_ID", "COUNTER_MAX_ATTEMPTS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ddb(aws_env):
    with mock_aws():
        client = boto3.client("dynamodb", region_name=REGION)
        client.create_table(
            TableName=TABLE_NAME,
            BillingMode="PAY_PER_REQUEST",
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        )
        yield client


@pytest.fixture
def table(ddb):
    return boto3.resource("dynamodb", region_name=REGION).Table(TABLE_NAME)
