"""This module holds the static legal content served by the catalog.

The texts are written for laypeople and kept in Portuguese. They are loaded
once, at import time, and are never mutated.
"""

from cidadania_legal.models.content import (
    CategoryIcon,
    EmergencyContact,
    FaqEntry,
    GlossaryCategory,
    GlossaryTerm,
    PartnerOrganization,
    RightsCategory,
    RightsTopic,
)

RIGHTS_CATEGORIES: tuple[RightsCategory, ...] = (
    RightsCategory(
        title="Direito do Consumidor",
        icon=CategoryIcon.SHOPPING_CART,
        topics=(
            RightsTopic(
                title="Produto com Defeito",
                description=(
                    "• Produtos não duráveis (alimentos): 30 dias para reclamar.\n"
                    "• Produtos duráveis (eletrónicos): 90 dias para reclamar.\n"
                    "A loja tem 30 dias para consertar. Se não o fizer, você pode pedir um produto novo, "
                    "seu dinheiro de volta ou um desconto."
                ),
            ),
            RightsTopic(
                title="Cobrança Indevida",
                description=(
                    "Se você pagar uma conta que não devia ou com valor errado, tem direito a receber de volta "
                    "o dobro do que pagou a mais."
                ),
            ),
            RightsTopic(
                title="Direito de Arrependimento",
                description=(
                    "Para compras feitas fora da loja física (internet, telefone), você tem 7 dias, a contar da "
                    "data de recebimento, para se arrepender, devolver o produto e receber o dinheiro de volta, "
                    "sem precisar de um motivo."
                ),
            ),
        ),
    ),
    RightsCategory(
        title="Direito Trabalhista",
        icon=CategoryIcon.WORK,
        topics=(
            RightsTopic(
                title="Demissão Sem Justa Causa",
                description=(
                    "Você tem direito a:\n"
                    "• Saldo de salário (dias trabalhados no mês).\n"
                    "• Aviso prévio (trabalhado ou indenizado).\n"
                    "• Férias vencidas e proporcionais + 1/3.\n"
                    "• 13º salário proporcional.\n"
                    "• Sacar o FGTS + multa de 40% paga pela empresa.\n"
                    "• Seguro-desemprego (se cumprir os requisitos)."
                ),
            ),
            RightsTopic(
                title="Acidente de Trabalho",
                description=(
                    "A empresa deve emitir a CAT (Comunicação de Acidente de Trabalho). Você tem direito a "
                    "estabilidade no emprego por 12 meses após retornar do auxílio-doença do INSS."
                ),
            ),
            RightsTopic(
                title="Horas Extras",
                description=(
                    "As horas que você trabalha além da sua jornada normal devem ser pagas com um acréscimo de, "
                    "no mínimo, 50% sobre o valor da hora normal."
                ),
            ),
        ),
    ),
    RightsCategory(
        title="Violência Doméstica",
        icon=CategoryIcon.FAVORITE,
        topics=(
            RightsTopic(
                title="Tipos de Violência",
                description=(
                    "A Lei Maria da Penha protege contra 5 tipos de violência:\n"
                    "• Física (agressões)\n"
                    "• Psicológica (ameaças, humilhação)\n"
                    "• Sexual (forçar atos sexuais)\n"
                    "• Patrimonial (reter dinheiro, destruir bens)\n"
                    "• Moral (calúnia, difamação)."
                ),
            ),
            RightsTopic(
                title="Medidas Protetivas",
                description=(
                    "São ordens judiciais para proteger a vítima. O agressor pode ser proibido de se aproximar "
                    "ou de entrar em contato. Podem ser pedidas em qualquer delegacia, de preferência na "
                    "Delegacia da Mulher."
                ),
            ),
        ),
    ),
)

GLOSSARY_CATEGORIES: tuple[GlossaryCategory, ...] = (
    GlossaryCategory(
        name="Direito de Família",
        icon=CategoryIcon.FAMILY,
        terms=(
            GlossaryTerm(
                term="Alimentos (Pensão Alimentícia)",
                definition=(
                    "Valor pago para ajudar no sustento de filhos ou ex-cônjuge que não consegue se manter sozinho."
                ),
            ),
            GlossaryTerm(
                term="Guarda Compartilhada",
                definition=(
                    "Quando pai e mãe, mesmo separados, tomam as decisões importantes sobre a vida dos filhos "
                    "em conjunto."
                ),
            ),
            GlossaryTerm(
                term="Tutela",
                definition=(
                    "Quando um adulto é nomeado por um juiz para cuidar de um menor de idade que não tem pais."
                ),
            ),
            GlossaryTerm(term="Divórcio", definition="Processo legal que encerra oficialmente um casamento."),
            GlossaryTerm(
                term="União Estável",
                definition=(
                    "Quando um casal vive junto como se fosse casado, de forma pública e com a intenção de "
                    "constituir família."
                ),
            ),
        ),
    ),
    GlossaryCategory(
        name="Direito do Trabalho",
        icon=CategoryIcon.WORK,
        terms=(
            GlossaryTerm(
                term="Rescisão",
                definition="É o fim do contrato de trabalho, seja por demissão ou por pedido de demissão.",
            ),
            GlossaryTerm(
                term="Justa Causa",
                definition=(
                    "Demissão por uma falta grave cometida pelo empregado, que perde a maioria dos seus direitos."
                ),
            ),
            GlossaryTerm(
                term="FGTS",
                definition=(
                    "Fundo de Garantia do Tempo de Serviço. Um valor que a empresa deposita todo mês numa conta "
                    "do empregado."
                ),
            ),
            GlossaryTerm(
                term="INSS",
                definition=(
                    "Instituto Nacional do Seguro Social. Responsável pela aposentadoria, auxílio-doença e "
                    "outros benefícios."
                ),
            ),
            GlossaryTerm(
                term="Aviso Prévio",
                definition=(
                    "Comunicação antecipada do fim do contrato de trabalho, que deve ser feita com pelo menos "
                    "30 dias de antecedência."
                ),
            ),
        ),
    ),
    GlossaryCategory(
        name="Direito do Consumidor",
        icon=CategoryIcon.SHOPPING_CART,
        terms=(
            GlossaryTerm(
                term="Vício Oculto",
                definition=(
                    "Defeito de fabricação que não é aparente e só se manifesta depois de um tempo de uso do "
                    "produto."
                ),
            ),
            GlossaryTerm(
                term="Prazo de Arrependimento",
                definition=(
                    "Direito de desistir de uma compra feita pela internet ou telefone em até 7 dias após o "
                    "recebimento."
                ),
            ),
            GlossaryTerm(
                term="Garantia Legal",
                definition=(
                    "Garantia obrigatória por lei. São 30 dias para produtos não duráveis e 90 dias para "
                    "produtos duráveis."
                ),
            ),
            GlossaryTerm(
                term="Oferta",
                definition=(
                    "Toda informação ou publicidade sobre um produto ou serviço. A empresa é obrigada a cumprir "
                    "o que prometeu."
                ),
            ),
        ),
    ),
    GlossaryCategory(
        name="Direito Criminal",
        icon=CategoryIcon.POLICE,
        terms=(
            GlossaryTerm(
                term="Flagrante Delito",
                definition="Quando alguém é pego cometendo um crime ou logo após cometê-lo.",
            ),
            GlossaryTerm(
                term="Inquérito Policial",
                definition="Investigação conduzida pela polícia para apurar um crime e descobrir quem o cometeu.",
            ),
            GlossaryTerm(
                term="Denúncia",
                definition=(
                    "Peça inicial do processo criminal, feita pelo Ministério Público, acusando alguém "
                    "formalmente de um crime."
                ),
            ),
            GlossaryTerm(
                term="Queixa-Crime",
                definition=(
                    "Peça inicial de alguns processos criminais, feita pela própria vítima ou seu representante "
                    "legal."
                ),
            ),
        ),
    ),
    GlossaryCategory(
        name="Termos Gerais",
        icon=CategoryIcon.GAVEL,
        terms=(
            GlossaryTerm(
                term="Habeas Corpus",
                definition=(
                    "Ação para proteger o direito de liberdade de alguém que foi preso ou está ameaçado de ser "
                    "preso ilegalmente."
                ),
            ),
            GlossaryTerm(
                term="Jurisprudência",
                definition=(
                    "Conjunto de decisões dos tribunais sobre um mesmo tema, que serve de orientação para casos "
                    "futuros."
                ),
            ),
            GlossaryTerm(
                term="Petição Inicial",
                definition=(
                    "Documento que inicia um processo na Justiça, onde se explica o caso e o que se está a pedir."
                ),
            ),
            GlossaryTerm(
                term="Liminar",
                definition=(
                    "Decisão rápida e provisória de um juiz no início de um processo para evitar um dano urgente."
                ),
            ),
            GlossaryTerm(
                term="Trânsito em Julgado",
                definition="Quando uma decisão judicial se torna definitiva e não se pode mais recorrer.",
            ),
        ),
    ),
)

FAQ_ENTRIES: tuple[FaqEntry, ...] = (
    FaqEntry(
        question="O que é a Defensoria Pública?",
        answer="É uma instituição que presta assistência jurídica gratuita para quem não pode pagar um advogado.",
    ),
    FaqEntry(
        question="Como peço uma medida protetiva?",
        answer=(
            "Você pode ir a uma Delegacia da Mulher ou a qualquer delegacia de polícia e registrar um boletim de "
            "ocorrência, solicitando as medidas protetivas."
        ),
    ),
    FaqEntry(
        question="Meu nome foi para o SPC/Serasa indevidamente. O que faço?",
        answer=(
            "Primeiro, contate a empresa para solicitar a retirada. Se não resolver, você pode procurar o Procon "
            "ou a Defensoria Pública."
        ),
    ),
    FaqEntry(
        question="Sofri um acidente de trabalho, quais meus direitos?",
        answer=(
            "Você tem direito à estabilidade no emprego por 12 meses após o retorno, além do auxílio-doença "
            "acidentário pago pelo INSS."
        ),
    ),
)

PARTNER_ORGANIZATIONS: tuple[PartnerOrganization, ...] = (
    PartnerOrganization(
        name="Defensoria Pública",
        description="Assistência jurídica gratuita",
        icon=CategoryIcon.ACCOUNT_BALANCE,
        phone="129",
        website="https://www.defensoria.sp.def.br/",
    ),
    PartnerOrganization(
        name="Procon",
        description="Defesa dos direitos do consumidor",
        icon=CategoryIcon.GAVEL,
        phone="151",
        website="https://www.procon.sp.gov.br/",
    ),
    PartnerOrganization(
        name="Central de Atendimento à Mulher",
        description="Orientação em situação de violência",
        icon=CategoryIcon.FEMALE,
        phone="180",
    ),
    PartnerOrganization(
        name="Disque Direitos Humanos",
        description="Denúncias de violações",
        icon=CategoryIcon.CAMPAIGN,
        phone="100",
    ),
    PartnerOrganization(
        name="Ministério Público",
        description="Defesa dos direitos sociais",
        icon=CategoryIcon.ACCOUNT_BALANCE,
        phone="127",
        website="http://www.mpsp.mp.br/",
    ),
)

OTHER_ORGANIZATIONS: tuple[str, ...] = (
    "OAB - Ordem dos Advogados do Brasil",
    "CRAS - Centro de Referência de Assistência Social",
    "Casa da Mulher Brasileira",
    "Movimento Negro Unificado (MNU)",
    "ANTRA - Associação Nacional de Travestis e Transexuais",
    "Pastoral Carcerária",
    "Comissão de Direitos Humanos (Câmaras Municipais)",
)

EMERGENCY_CONTACTS: tuple[EmergencyContact, ...] = (
    EmergencyContact(number="190", service="Polícia"),
    EmergencyContact(number="193", service="Bombeiros"),
    EmergencyContact(number="192", service="SAMU"),
)
