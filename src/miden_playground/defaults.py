# defaults.py
# Source text pre-filled into a fresh session, plus read-only reference
# listings of the standard wallet and auth modules.

NOTE_SCRIPT = """\
use.miden::account
use.miden::note
use.miden::contracts::wallets::basic->wallet

# ERRORS
const.ERR_P2ID_WRONG_NUMBER_OF_INPUTS=0x00020050
const.ERR_P2ID_TARGET_ACCT_MISMATCH=0x00020051

#! Adds all assets of the note to the account vault.
proc.add_note_assets_to_account
    push.0 exec.note::get_assets
    # => [num_of_assets, 0 = ptr, ...]

    mul.4 dup.1 add
    # => [end_ptr, ptr, ...]

    padw movup.5
    # => [ptr, 0, 0, 0, 0, end_ptr, ...]

    dup dup.6 neq
    while.true
        mem_loadw
        padw swapw padw padw swapdw
        call.wallet::receive_asset
        dropw dropw dropw
        movup.4 add.4 dup dup.6 neq
    end

    drop dropw drop
end

begin
    # store the note inputs to memory starting at address 0
    push.0 exec.note::get_inputs
    # => [num_inputs, inputs_ptr]

    eq.1 assert.err=ERR_P2ID_WRONG_NUMBER_OF_INPUTS
    # => [inputs_ptr]

    mem_load
    # => [target_account_id_prefix]

    exec.account::get_id
    # => [account_id, target_account_id]

    eq assert.err=ERR_P2ID_TARGET_ACCT_MISMATCH
    # => []

    exec.add_note_assets_to_account
end
"""

ACCOUNT_CODE = """\
export.::miden::contracts::wallets::basic::receive_asset
export.::miden::contracts::wallets::basic::create_note
export.::miden::contracts::wallets::basic::move_asset_to_note
export.::miden::contracts::auth::basic::auth_tx_rpo_falcon512
"""

TRANSACTION_SCRIPT = """\
use.miden::contracts::auth::basic->auth_tx

begin
    call.auth_tx::auth_tx_rpo_falcon512
end
"""

BASIC_WALLET = """\
use.miden::account
use.miden::tx

#! Adds the provided asset to the current account.
#!
#! Inputs:  [ASSET, pad(12)]
#! Outputs: [pad(16)]
export.receive_asset
    exec.account::add_asset
    padw swapw dropw
end

#! Creates a new note and returns the index of the note.
#!
#! Inputs:  [tag, aux, note_type, execution_hint, RECIPIENT, pad(8)]
#! Outputs: [note_idx, pad(15)]
export.create_note
    exec.tx::create_note
end

#! Removes the specified asset from the account and adds it to the output note.
#!
#! Inputs:  [ASSET, note_idx, pad(11)]
#! Outputs: [ASSET, note_idx, pad(11)]
export.move_asset_to_note
    dupw exec.account::remove_asset
    dupw dup.8 exec.tx::add_asset_to_note
    dropw
end
"""

BASIC_AUTHENTICATION = """\
use.miden::account
use.miden::tx
use.std::crypto::dsa::rpo_falcon512

# The slot in this component's storage layout where the public key is stored.
const.PUBLIC_KEY_SLOT=0

#! Authenticate a transaction using the Falcon signature scheme.
#!
#! Inputs:  [pad(16)]
#! Outputs: [pad(16)]
export.auth_tx_rpo_falcon512
    # get commitments to output notes
    exec.tx::get_output_notes_commitment
    # get commitment to input notes
    exec.tx::get_input_notes_commitment
    # get current nonce of the account and pad
    exec.account::get_nonce push.0.0.0
    # get current AccountID and pad
    exec.account::get_id push.0.0.0

    # compute the message to be signed
    hmerge hmerge hmerge

    # get public key from account storage and verify signature
    push.PUBLIC_KEY_SLOT exec.account::get_item
    exec.rpo_falcon512::verify

    # increment the account nonce
    push.1 exec.account::incr_nonce
end
"""
