# FILE: tests/conftest.py

import pytest
import sys
import os
import logging

# Add src directory and project root (for main.py) to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from isa_samples import ALTERNATE_ISA, STANDARD_ISA

# ==============================================================================
# PYTEST CONFIGURATION & HOOKS
# ==============================================================================

def pytest_configure(config):
    """Configure pytest settings and markers."""
    config.addinivalue_line("markers", "unit: Pure unit tests with no external dependencies.")

@pytest.fixture(scope="session", autouse=True)
def setup_test_environment(pytestconfig):
    """Set up test environment with logging configuration."""
    # Use pytest's log_cli_level if available, otherwise default to INFO
    log_level = pytestconfig.getoption("log_cli_level") or "INFO"
    logging.basicConfig(
        level=log_level.upper(),
        format="[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s",
        stream=sys.stdout,
        force=True,
    )
    logging.info(f"Test logging configured with level: {log_level.upper()}")
    yield

# ==============================================================================
# ISA HEADER FIXTURES
# ==============================================================================

@pytest.fixture(scope="session")
def standard_isa() -> bytes:
    """A 106-byte ISA header using '*', ':' and '~'."""
    return STANDARD_ISA

@pytest.fixture(scope="session")
def alternate_isa() -> bytes:
    """A 106-byte ISA header using '^' as element separator, '>' as sub-element separator and '}' as terminator."""
    return ALTERNATE_ISA

@pytest.fixture(scope="session")
def valid_837p_edi_string() -> str:
    """Provides a short 837P interchange whose ISA header uses '>' as the component separator."""
    return """
ISA*00*          *00*          *ZZ*SENDERID       *ZZ*RECEIVERID     *240715*1200*^*00501*000000001*0*P*>~
GS*HC*SENDER*RECEIVER*20240715*1200*1*X*005010X222A1~
ST*837*0001*005010X222A1~
BHT*0019*00*1234*20240715*1200*CH~
NM1*41*2*PREMIER BILLING*****46*SUBMITTER1~
CLM*PATCTRL123*500***11>B>1*Y*A*Y*Y~
HI*BK>87340~
SE*5*0001~
GE*1*1~
IEA*1*000000001~
""".strip()

