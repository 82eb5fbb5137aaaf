"""beanwire - static Spring dependency-injection analysis of Java class facts."""

__version__ = "0.1.0"

from beanwire.application.services import BeanResolutionService
from beanwire.domain.model import AnalysisConfig, FileAnalysis

__all__ = ["AnalysisConfig", "BeanResolutionService", "FileAnalysis", "__version__"]
