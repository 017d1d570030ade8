"""This module holds the canned texts produced by the simulated flows."""

CHAT_GREETING = "Olá! Faça uma pergunta sobre seus direitos. Ex: 'Quais os meus direitos se fui demitido?'"

CHAT_DISCLAIMER = (
    "Importante: esta é uma orientação geral e não substitui a consulta com um advogado. "
    "Para o seu caso específico, a recomendação é sempre procurar a Defensoria Pública."
)

# Placeholders are {nome}, {cidade}, {assunto}, {descricao} and {data}.
DRAFT_TEMPLATE = """**Para:** [Nome da Empresa ou Destinatário]
**De:** {nome}
**Assunto:** {assunto}

Prezados(as),

Eu, {nome}, residente em {cidade}, venho por meio desta comunicação formalizar a seguinte questão:

{descricao}

Diante do exposto, solicito uma análise e uma solução para o problema apresentado.

Agradeço a atenção e aguardo um breve retorno.

Atenciosamente,

{nome}
{cidade}, {data}"""

COMPLAINT_CONFIRMATION_TITLE = "Denúncia registrada com sucesso."
COMPLAINT_CONFIRMATION_TEXT = (
    "O seu registro anônimo ajuda a mapear violações de direitos. "
    "Para uma ação imediata, use os canais oficiais como o Disque 100."
)
