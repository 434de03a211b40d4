from aws_lambda_powertools.utilities import parameters
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    debug: bool = False
    app_name: str
    aws_access_key_id: str
    aws_secret_access_key: str
    aws_region: str = Field(alias="AWS_DEFAULT_REGION")
    default_timezone: str = "UTC"
    jwt_secret_ssm_param_name: str
    stage: str

    @computed_field
    @property
    def jwt_secret(self) -> str:
        return parameters.get_parameter(self.jwt_secret_ssm_param_name, decrypt=True)
