"""Configuração da biblioteca: settings da API Loops e logging estruturado."""
