from .health_aggregator import (
    check_dependencies_health as check_dependencies_health,
    check_dependency_health as check_dependency_health,
)
from .models import (
    DependenciesHealth as DependenciesHealth,
    DependencyHealth as DependencyHealth,
)
