"""
pytest 공통 fixture 정의

설정 로더, 게이트웨이 테스트용 fixture
"""

import tempfile
from pathlib import Path

import pytest

from adapters.mock.rest_client import MockSignedRestClient
from core.config.loader import Settings
from wallet.gateway import Wallet


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성"""
    secrets_content = """# 테스트용 secrets.yaml
mode: testnet

production:
  api_key: "prod_api_key_12345"
  api_secret: "prod_api_secret_67890"

testnet:
  api_key: "test_api_key_abcde"
  api_secret: "test_api_secret_fghij"

us:
  api_key: "us_api_key_klmno"
  api_secret: "us_api_secret_pqrst"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_production(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성 (production 모드)"""
    secrets_content = """mode: production

production:
  api_key: "prod_api_key_12345"
  api_secret: "prod_api_secret_67890"
  recv_window: 10000

testnet:
  api_key: "test_api_key_abcde"
  api_secret: "test_api_secret_fghij"
"""
    secrets_path = temp_dir / "secrets_prod.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_us(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성 (Binance.US 모드)"""
    secrets_content = """mode: us

us:
  api_key: "us_api_key_klmno"
  api_secret: "us_api_secret_pqrst"
"""
    secrets_path = temp_dir / "secrets_us.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_invalid_mode(temp_dir: Path) -> Path:
    """잘못된 모드의 secrets.yaml 파일 생성"""
    secrets_content = """mode: invalid_mode

production:
  api_key: "prod_api_key"
  api_secret: "prod_api_secret"

testnet:
  api_key: "test_api_key"
  api_secret: "test_api_secret"
"""
    secrets_path = temp_dir / "secrets_invalid.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def reset_settings():
    """Settings 싱글턴 초기화 (테스트 전후)"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def mock_client() -> MockSignedRestClient:
    """Mock 서명 요청 클라이언트"""
    return MockSignedRestClient()


@pytest.fixture
def wallet(mock_client: MockSignedRestClient) -> Wallet:
    """Mock 클라이언트를 사용하는 Wallet"""
    return Wallet(mock_client)
