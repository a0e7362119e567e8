from pydantic import BaseModel, Field
from typing import Optional, List
import yaml, pathlib

class ReportConfig(BaseModel):
    line_len: int = Field(64, ge=1, description="Width of title and closing delimiter lines")
    title_delim: str = Field("#", min_length=1)
    end_delim: str = Field("=", min_length=1)
    junit: Optional[str] = Field(None, description="Write JUnit XML to this path")

class AppConfig(BaseModel):
    suites: List[str] = Field(default_factory=list, description="Modules exposing register(mt), e.g. mysuites.messaging")
    no_server: bool = Field(False, description="Only run suites that do not need a server")
    log_level: str = Field("WARNING")
    report: ReportConfig = Field(default_factory=ReportConfig)

def load_config(path: Optional[str]) -> AppConfig:
    if not path or not pathlib.Path(path).exists():
        return AppConfig()
    data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    return AppConfig.model_validate(data)
