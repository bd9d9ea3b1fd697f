"""Stock criteria for sample ordering."""

from typing import List, Optional

import pendulum

from .criteria import Criterion, OrderingConfiguration, parse_criterion

DEFAULT_CRITERIA = [
    {
        "id": "production-date",
        "name": "Data de Produção",
        "description": "Prioriza amostras mais recentes",
        "type": "date",
        "weight": 30,
        "direction": "desc",
        "is_active": True,
        "data_path": "productionDate",
        "normalization_config": {"max": 30},
    },
    {
        "id": "quality-score",
        "name": "Score de Qualidade",
        "description": "Baseado em avaliações anteriores",
        "type": "numeric",
        "weight": 25,
        "direction": "desc",
        "is_active": True,
        "data_path": "quality.score",
        "normalization_config": {"min": 0, "max": 100, "default_value": 50},
    },
    {
        "id": "priority",
        "name": "Prioridade",
        "description": "Nível de prioridade da amostra",
        "type": "enum",
        "weight": 20,
        "direction": "desc",
        "is_active": True,
        "options": ["baixa", "media", "alta"],
        "data_path": "priority",
        "normalization_config": {"default_value": 50},
    },
    {
        "id": "test-frequency",
        "name": "Frequência de Teste",
        "description": "Baseado na última avaliação",
        "type": "numeric",
        "weight": 15,
        "direction": "asc",
        "is_active": True,
        "data_path": "testFrequency",
        "normalization_config": {"min": 1, "max": 30, "default_value": 7},
    },
    {
        "id": "risk-level",
        "name": "Nível de Risco",
        "description": "Risco associado à amostra",
        "type": "enum",
        "weight": 10,
        "direction": "desc",
        "is_active": False,
        "options": ["baixo", "medio", "alto"],
        "data_path": "riskLevel",
        "normalization_config": {"default_value": 33},
    },
]


def default_criteria() -> List[Criterion]:
    """Fresh copies of the stock criteria."""
    now = pendulum.now("UTC")
    return [
        parse_criterion({**data, "created_at": now, "updated_at": now})
        for data in DEFAULT_CRITERIA
    ]


def default_configuration(
    config_id: str = "default",
    name: str = "Ordenação padrão",
    created_by: Optional[str] = None,
) -> OrderingConfiguration:
    """A default-flagged configuration built from the stock criteria."""
    now = pendulum.now("UTC")
    return OrderingConfiguration(
        id=config_id,
        name=name,
        description="Critérios padrão de ordenação de amostras",
        criteria=default_criteria(),
        is_default=True,
        created_by=created_by,
        created_at=now,
        updated_at=now,
    )
