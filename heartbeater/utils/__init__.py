"""
Utilitários do heartbeater.

Módulos:
- constants: Constantes do protocolo e defaults
- config: Configuração via .env
- logger: Logging com Loguru
"""
