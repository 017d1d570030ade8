"""
This module contains all the display strings for the application.
Keeping them here allows the codebase to remain in English while serving Portuguese content.
"""

# Meta
SITE_TITLE = "Cidadania Legal"
SITE_DESCRIPTION = "Informação sobre direitos para todos."
NAV_BACK = "Voltar"
CLOSE = "FECHAR"

# Home
HOME_GREETING = "Olá!"
HOME_WELCOME = "Bem-vindo(a) ao Cidadania Legal. Como podemos ajudar hoje?"
HOME_RIGHTS_TITLE = "Conheça Seus Direitos"
HOME_RIGHTS_SUBTITLE = "O primeiro passo é a informação. Navegue por temas e entenda seus direitos."
HOME_TOOLS_TITLE = "Ferramentas Interativas"
HOME_CHAT = "Tira-Dúvidas"
HOME_DOCUMENTS = "Documentos"
HOME_SUPPORT_TITLE = "Apoio e Recursos"
HOME_GLOSSARY_TITLE = "Decifrando o Juridiquês"
HOME_GLOSSARY_SUBTITLE = "Traduza termos legais complicados."
HOME_FAQ_TITLE = "Dúvidas Frequentes"
HOME_FAQ_SUBTITLE = "Encontre respostas para perguntas comuns."
HOME_PARTNERS_TITLE = "Encontre Apoio"
HOME_PARTNERS_SUBTITLE = "Conecte-se com ONGs e Defensorias."
HOME_COMPLAINT_TITLE = "Denúncia Anônima"
HOME_COMPLAINT_SUBTITLE = "Registre violações de direitos de forma segura."

# Rights
RIGHTS_TITLE = "Meus Direitos"
RIGHTS_SUBTITLE = "Selecione uma categoria para ver os tópicos e toque num tópico para saber mais detalhes."
RIGHTS_SEARCH_PLACEHOLDER = "Pesquisar tema..."

# Glossary
GLOSSARY_TITLE = "Decifrando o Juridiquês"
GLOSSARY_SUBTITLE = (
    "Encontre aqui a tradução de termos complicados do mundo jurídico para uma linguagem que todos entendem."
)
GLOSSARY_SEARCH_PLACEHOLDER = "Pesquisar termo..."
SEARCH_NO_RESULTS = 'Nenhum termo encontrado para "{query}"'
SEE_DETAILS = "Ver detalhes"

# FAQ
FAQ_TITLE = "Dúvidas Frequentes"

# Chat
CHAT_INPUT_PLACEHOLDER = "Digite sua pergunta..."
CHAT_SEND = "Enviar"
CHAT_TYPING = "A pensar..."

# Documents
DOCS_TITLE = "Gerador de Documentos"
DOCS_SUBTITLE = "Preencha os campos abaixo para criar um rascunho de documento formal."
DOCS_FIELD_NOME = "Seu Nome Completo"
DOCS_FIELD_CIDADE = "Sua Cidade"
DOCS_FIELD_ASSUNTO = "Assunto"
DOCS_FIELD_ASSUNTO_PLACEHOLDER = "Ex: Cobrança indevida, produto com defeito"
DOCS_FIELD_DESCRICAO = "Descreva o problema detalhadamente"
DOCS_GENERATE = "Gerar Rascunho do Documento"
DOCS_GENERATING = "Gerando..."
DOCS_RESULT_TITLE = "Rascunho Gerado:"
DOCS_COPY = "Copiar Texto"
DOCS_COPIED = "Texto copiado!"
DOCS_CLEAR = "Limpar formulário"

# Complaint
COMPLAINT_TITLE = "Registrar Violação de Direitos"
COMPLAINT_SUBTITLE = "Este canal é para registro anônimo e não solicita dados pessoais. Sua denúncia é confidencial."
COMPLAINT_DESCRIPTION = "Descreva a violação"
COMPLAINT_TYPE = "Tipo de Violação"
COMPLAINT_SUBMIT = "Enviar Denúncia Anônima"
COMPLAINT_ANOTHER = "Fazer outra denúncia"

# Partners
PARTNERS_TITLE = "Parceiros e Apoio"
PARTNERS_SUBTITLE = "Organizações parceiras que podem ajudar você"
PARTNERS_EMERGENCY = "Números de Emergência"
PARTNERS_SITE = "Site"
PARTNERS_CALL = "Ligar"
PARTNERS_OTHERS = "Outras Organizações de Apoio"

# Errors
NOT_FOUND_TITLE = "Página não encontrada"
NOT_FOUND_TEXT = "O conteúdo que você procura não existe ou não está mais disponível."
