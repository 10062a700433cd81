# Auto-generated __init__.py

from . import conftest
from .conftest import fixed_time
from .conftest import identity
from .conftest import key_file
from .conftest import sample_tree
from .conftest import undecodable_tree
from . import test_accumulators
from .test_accumulators import test_category_sizes
from .test_accumulators import test_default_set_has_eleven_algorithms
from .test_accumulators import test_one_shot_adapter_cannot_be_reused
from .test_accumulators import test_one_shot_adapter_covers_every_byte
from .test_accumulators import test_one_shot_adapter_empty_stream
from .test_accumulators import test_one_shot_adapter_spills_to_disk
from .test_accumulators import test_register_custom_algorithm
from .test_accumulators import test_register_rejects_unknown_category
from .test_accumulators import test_streaming_matches_one_shot_reference
from .test_accumulators import test_unknown_algorithm
from .test_accumulators import test_xxh3_reflects_stream_content
from . import test_archive
from .test_archive import test_archive_round_trip
from .test_archive import test_empty_directory_makes_empty_archive
from .test_archive import test_encoding_failure_is_wrapped
from .test_archive import test_extracted_tree_matches_source
from .test_archive import test_file_vanishing_during_archive
from .test_archive import test_root_is_not_a_member
from .test_archive import test_undecodable_name_is_escaped
from .test_archive import test_unwritable_destination
from . import test_cli
from .test_cli import isolated_settings
from .test_cli import test_bad_key_leaves_no_artifacts
from .test_cli import test_build_options_overrides_win
from .test_cli import test_build_options_rejects_bad_values
from .test_cli import test_ephemeral_key_is_announced
from .test_cli import test_key_store_is_created_once_and_reused
from .test_cli import test_load_settings_defaults_when_missing
from .test_cli import test_load_settings_from_environment
from .test_cli import test_load_settings_keeps_unknown_keys
from .test_cli import test_load_settings_merges_sections
from .test_cli import test_load_settings_rejects_bad_files
from .test_cli import test_load_settings_rejects_non_object_sections
from .test_cli import test_main_hash_then_verify
from .test_cli import test_main_hashes_undecodable_names
from .test_cli import test_main_reports_bad_settings
from .test_cli import test_main_reports_missing_root
from .test_cli import test_main_reports_null_settings_section
from .test_cli import test_main_requires_a_command
from .test_cli import test_missing_root_fails_before_any_output
from .test_cli import test_run_is_deterministic_with_fixed_key_and_time
from .test_cli import test_run_writes_signed_manifest_and_archive
from . import test_directory_hash
from .test_directory_hash import FakeClock
from .test_directory_hash import test_chunk_size_does_not_change_result
from .test_directory_hash import test_concatenated_content_in_path_order
from .test_directory_hash import test_creation_order_does_not_matter
from .test_directory_hash import test_empty_directory_digests_empty_stream
from .test_directory_hash import test_empty_files_and_directories_are_neutral
from .test_directory_hash import test_file_removed_after_inventory
from .test_directory_hash import test_nested_files_follow_full_path_order
from .test_directory_hash import test_progress_disabled_is_silent
from .test_directory_hash import test_progress_reports_only_after_interval
from .test_directory_hash import test_progress_with_zero_bytes
from .test_directory_hash import test_same_tree_same_digests
from .test_directory_hash import test_single_byte_change_changes_every_digest
from .test_directory_hash import test_subset_of_algorithms
from .test_directory_hash import test_unreadable_file_raises_read_error
from .test_directory_hash import test_verbose_logs_each_file
from . import test_identity
from .test_identity import test_bare_private_key_gets_default_identity
from .test_identity import test_binary_key_material_is_rejected
from .test_identity import test_default_email_uses_host
from .test_identity import test_encrypted_key_is_rejected
from .test_identity import test_export_and_reload_keeps_key
from .test_identity import test_file_without_key_block
from .test_identity import test_garbage_signature_is_not_valid
from .test_identity import test_identity_details
from .test_identity import test_key_id_format
from .test_identity import test_malformed_key_file
from .test_identity import test_mismatched_certificate_is_rejected
from .test_identity import test_missing_key_file
from .test_identity import test_other_key_fails
from .test_identity import test_pem_blocks_splits_key_file
from .test_identity import test_public_key_block_is_accepted
from .test_identity import test_rsa_key_is_accepted
from .test_identity import test_sign_and_verify
from .test_identity import test_tampered_payload_fails
from .test_identity import test_unreadable_public_material
from . import test_manifest
from .test_manifest import test_awkward_file_names_are_escaped
from .test_manifest import test_files_table_lists_regular_files_in_order
from .test_manifest import test_hashes_are_grouped_by_category
from .test_manifest import test_manifest_is_valid_toml
from .test_manifest import test_read_manifest_rejects_invalid_toml
from .test_manifest import test_read_manifest_rejects_missing_sections
from .test_manifest import test_read_manifest_requires_signature_value
from .test_manifest import test_same_inputs_give_identical_text
from .test_manifest import test_sections_appear_in_order
from .test_manifest import test_signed_block_depends_on_values_only
from .test_manifest import test_toml_string_escapes_control_characters
from .test_manifest import test_undecodable_names_stay_valid_toml
from .test_manifest import test_unknown_algorithms_are_grouped_last
from .test_manifest import test_verify_detects_changed_tree
from .test_manifest import test_verify_detects_edited_hash
from .test_manifest import test_verify_undecodable_tree
from .test_manifest import test_verify_valid_manifest
from .test_manifest import test_verify_with_wrong_key
from .test_manifest import test_write_manifest_failure
from . import test_models
from .test_models import test_digest_result_is_read_only_and_groups
from .test_models import test_directory_display_name_for_dot
from .test_models import test_file_record_is_immutable
from .test_models import test_inventory_sorts_and_totals
from .test_models import test_run_options_paths_are_adjacent
from .test_models import test_run_options_rejects_unknown_symlink_policy
from . import test_scanner
from .test_scanner import test_build_inventory_basic
from .test_scanner import test_entry_stat_failure_is_skipped
from .test_scanner import test_file_root_raises
from .test_scanner import test_follow_symlinks_records_targets_and_breaks_cycles
from .test_scanner import test_missing_root_raises
from .test_scanner import test_out_of_range_mtime_is_skipped
from .test_scanner import test_root_is_not_recorded
from .test_scanner import test_sort_is_by_full_relative_path
from .test_scanner import test_symlinks_skipped_by_default
from .test_scanner import test_undecodable_name_is_kept_raw
from .test_scanner import test_unknown_symlink_policy
from .test_scanner import test_unlistable_directory_is_skipped
from . import test_staging
from .test_staging import test_commit_all_is_all_or_nothing
from .test_staging import test_commit_moves_partial
from .test_staging import test_discard_all_tolerates_missing_files
from .test_staging import test_discard_removes_partial_only
from .test_staging import test_partial_name_sits_beside_target

__all__ = [
    "conftest",
    "fixed_time",
    "identity",
    "key_file",
    "sample_tree",
    "undecodable_tree",
    "test_accumulators",
    "test_category_sizes",
    "test_default_set_has_eleven_algorithms",
    "test_one_shot_adapter_cannot_be_reused",
    "test_one_shot_adapter_covers_every_byte",
    "test_one_shot_adapter_empty_stream",
    "test_one_shot_adapter_spills_to_disk",
    "test_register_custom_algorithm",
    "test_register_rejects_unknown_category",
    "test_streaming_matches_one_shot_reference",
    "test_unknown_algorithm",
    "test_xxh3_reflects_stream_content",
    "test_archive",
    "test_archive_round_trip",
    "test_empty_directory_makes_empty_archive",
    "test_encoding_failure_is_wrapped",
    "test_extracted_tree_matches_source",
    "test_file_vanishing_during_archive",
    "test_root_is_not_a_member",
    "test_undecodable_name_is_escaped",
    "test_unwritable_destination",
    "test_cli",
    "isolated_settings",
    "test_bad_key_leaves_no_artifacts",
    "test_build_options_overrides_win",
    "test_build_options_rejects_bad_values",
    "test_ephemeral_key_is_announced",
    "test_key_store_is_created_once_and_reused",
    "test_load_settings_defaults_when_missing",
    "test_load_settings_from_environment",
    "test_load_settings_keeps_unknown_keys",
    "test_load_settings_merges_sections",
    "test_load_settings_rejects_bad_files",
    "test_load_settings_rejects_non_object_sections",
    "test_main_hash_then_verify",
    "test_main_hashes_undecodable_names",
    "test_main_reports_bad_settings",
    "test_main_reports_missing_root",
    "test_main_reports_null_settings_section",
    "test_main_requires_a_command",
    "test_missing_root_fails_before_any_output",
    "test_run_is_deterministic_with_fixed_key_and_time",
    "test_run_writes_signed_manifest_and_archive",
    "test_directory_hash",
    "FakeClock",
    "test_chunk_size_does_not_change_result",
    "test_concatenated_content_in_path_order",
    "test_creation_order_does_not_matter",
    "test_empty_directory_digests_empty_stream",
    "test_empty_files_and_directories_are_neutral",
    "test_file_removed_after_inventory",
    "test_nested_files_follow_full_path_order",
    "test_progress_disabled_is_silent",
    "test_progress_reports_only_after_interval",
    "test_progress_with_zero_bytes",
    "test_same_tree_same_digests",
    "test_single_byte_change_changes_every_digest",
    "test_subset_of_algorithms",
    "test_unreadable_file_raises_read_error",
    "test_verbose_logs_each_file",
    "test_identity",
    "test_bare_private_key_gets_default_identity",
    "test_binary_key_material_is_rejected",
    "test_default_email_uses_host",
    "test_encrypted_key_is_rejected",
    "test_export_and_reload_keeps_key",
    "test_file_without_key_block",
    "test_garbage_signature_is_not_valid",
    "test_identity_details",
    "test_key_id_format",
    "test_malformed_key_file",
    "test_mismatched_certificate_is_rejected",
    "test_missing_key_file",
    "test_other_key_fails",
    "test_pem_blocks_splits_key_file",
    "test_public_key_block_is_accepted",
    "test_rsa_key_is_accepted",
    "test_sign_and_verify",
    "test_tampered_payload_fails",
    "test_unreadable_public_material",
    "test_manifest",
    "test_awkward_file_names_are_escaped",
    "test_files_table_lists_regular_files_in_order",
    "test_hashes_are_grouped_by_category",
    "test_manifest_is_valid_toml",
    "test_read_manifest_rejects_invalid_toml",
    "test_read_manifest_rejects_missing_sections",
    "test_read_manifest_requires_signature_value",
    "test_same_inputs_give_identical_text",
    "test_sections_appear_in_order",
    "test_signed_block_depends_on_values_only",
    "test_toml_string_escapes_control_characters",
    "test_undecodable_names_stay_valid_toml",
    "test_unknown_algorithms_are_grouped_last",
    "test_verify_detects_changed_tree",
    "test_verify_detects_edited_hash",
    "test_verify_undecodable_tree",
    "test_verify_valid_manifest",
    "test_verify_with_wrong_key",
    "test_write_manifest_failure",
    "test_models",
    "test_digest_result_is_read_only_and_groups",
    "test_directory_display_name_for_dot",
    "test_file_record_is_immutable",
    "test_inventory_sorts_and_totals",
    "test_run_options_paths_are_adjacent",
    "test_run_options_rejects_unknown_symlink_policy",
    "test_scanner",
    "test_build_inventory_basic",
    "test_entry_stat_failure_is_skipped",
    "test_file_root_raises",
    "test_follow_symlinks_records_targets_and_breaks_cycles",
    "test_missing_root_raises",
    "test_out_of_range_mtime_is_skipped",
    "test_root_is_not_recorded",
    "test_sort_is_by_full_relative_path",
    "test_symlinks_skipped_by_default",
    "test_undecodable_name_is_kept_raw",
    "test_unknown_symlink_policy",
    "test_unlistable_directory_is_skipped",
    "test_staging",
    "test_commit_all_is_all_or_nothing",
    "test_commit_moves_partial",
    "test_discard_all_tolerates_missing_files",
    "test_discard_removes_partial_only",
    "test_partial_name_sits_beside_target",
]
