'''AWS test helpers'''
from aws_lambda_powertools.utilities.typing import LambdaContext


def create_lambda_function_context(function_name: str, region: str = 'us-east-1') -> LambdaContext:
    '''Return a Lambda context object for the given function'''
    context = LambdaContext()
    context._function_name = function_name
    context._function_version = '$LATEST'
    context._invoked_function_arn = 'arn:aws:lambda:{}:123456789012:function:{}'.format(region, function_name)
    context._memory_limit_in_mb = 128
    context._aws_request_id = '00000000-0000-0000-0000-000000000000'
    context._log_group_name = '/aws/lambda/{}'.format(function_name)
    context._log_stream_name = 'test'
    return context
